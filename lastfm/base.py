#!/usr/bin/env python
"""Module containing the base class of the domain objects"""

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm"

class LastfmBase(object):
    """
    Base class of the domain objects. Subclasses define C{__eq__} and
    C{__lt__}, the other comparisons are derived from those two.
    """

    def _default_params(self, extra_params = None):
        """
        The request parameters identifying this object, merged with
        extra_params. Subclasses add their own identifying parameters.
        """
        return dict(extra_params or {})

    def __eq__(self, other):
        raise NotImplementedError("The subclass must override this method")

    def __lt__(self, other):
        raise NotImplementedError("The subclass must override this method")

    def __gt__(self, other):
        return not (self < other or self == other)

    def __ne__(self, other):
        return not self == other

    def __ge__(self, other):
        return not self < other

    def __le__(self, other):
        return not self > other
