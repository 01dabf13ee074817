#!/usr/bin/env python

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm"

from lastfm.base import LastfmBase
from lastfm.mixin import mixin

@mixin("property_adder")
class TopItem(LastfmBase):
    """
    An item of a top list together with its weight in the list, which is a
    tag count, a play count or a usage count depending on the list.
    """
    class Meta(object):
        properties = ["item", "weight"]

    def __init__(self, item, weight):
        self._item = item
        self._weight = weight

    def __eq__(self, other):
        return type(self) == type(other) and \
            self.item == other.item and self.weight == other.weight

    def __lt__(self, other):
        return self.weight < other.weight

    __hash__ = None

    def __repr__(self):
        return "<lastfm.%s: %r (%s)>" % (self.__class__.__name__, self.item, self.weight)

class TopAlbum(TopItem):
    """An album and its weight"""
    pass

class TopArtist(TopItem):
    """An artist and its weight"""
    pass

class TopTrack(TopItem):
    """A track and its weight"""
    pass

class TopTag(TopItem):
    """A tag and its weight"""
    pass
