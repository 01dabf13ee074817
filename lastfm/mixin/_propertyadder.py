#!/usr/bin/env python

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm.mixin"

def _stored_property(name):
    attribute_name = "_%s" % name

    def getter(self):
        return getattr(self, attribute_name, None)

    return property(fget = getter, doc = "%s, read only" % name)

def property_adder(cls):
    """
    Add a read only property for every name in C{cls.Meta.properties},
    returning the value stored in the matching underscore attribute, or
    None if it was never set. Names the class already defines are skipped.
    """
    for name in cls.Meta.properties:
        if not hasattr(cls, name):
            setattr(cls, name, _stored_property(name))
    return cls
