#!/usr/bin/env python
"""Decorators shared by the domain classes of the package"""

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm"

import copy

from decorator import decorator

def top_property(list_property_name):
    """
    Turn a method into a property giving the first element of the list
    property list_property_name, or None when that list is empty. The
    method body is not called, only its docstring is used.

    @param list_property_name: name of the list property, like 'top_albums'
    @type list_property_name:  L{str}
    @rtype:                    L{property}
    """
    def make_property(func):
        def first(ob):
            items = getattr(ob, list_property_name)
            if not items:
                return None
            return items[0]
        return property(fget = first, doc = func.__doc__)
    return make_property

def cached_property(func):
    """
    Turn a getter into a property whose value is fetched once and kept in
    the instance attribute C{_<name>}. Callers get a shallow copy, so the
    kept value cannot be changed from outside. Putting None back into the
    attribute makes the next access fetch again.

    @param func:  the getter
    @type func:   C{function}
    @rtype:       L{property}
    """
    attribute_name = "_%s" % func.__name__

    def get(ob):
        value = getattr(ob, attribute_name, None)
        if value is None:
            value = func(ob)
            setattr(ob, attribute_name, value)
        return copy.copy(value)

    return property(fget = get, doc = func.__doc__)

@decorator
def authentication_required(func, *args, **kwargs):
    """
    Guard a method needing a session key. The api is the C{_api} of the
    object the method is called on, or the object itself for L{Api} methods.
    Without a session key nothing is sent to last.fm.

    @raise AuthenticationRequiredError: If the api is not authenticated.
    """
    self = args[0]
    api = getattr(self, '_api', self)
    if not api.authenticated:
        raise AuthenticationRequiredError(
            "%s requires an authenticated session" % func.__name__)
    return func(*args, **kwargs)

from lastfm.error import AuthenticationRequiredError
