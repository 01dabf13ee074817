#!/usr/bin/env python

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm.mixin"

from lastfm.mixin._searchable import searchable
from lastfm.mixin._taggable import taggable
from lastfm.mixin._chartable import chartable
from lastfm.mixin._propertyadder import property_adder

_mixins = {
    'searchable': searchable,
    'taggable': taggable,
    'property_adder': property_adder,
}

def mixin(*mixins):
    def wrapper(cls):
        for m in reversed(mixins):
            cls = _mixins[m](cls)
        return cls
    return wrapper

__all__ = ['searchable', 'taggable', 'chartable', 'property_adder', 'mixin']
