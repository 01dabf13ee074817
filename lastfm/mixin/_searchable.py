#!/usr/bin/env python

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm.mixin"

def searchable(cls):
    @classmethod
    def search(cls,
               api,
               search_item,
               items_per_page = 30,
               **kwds):
        """
        Search last.fm by name. Extra keyword arguments are sent as
        additional search terms when they are not None.

        @return:  the search, which fetches its result pages on demand
        @rtype:   L{Search}
        """
        from lastfm.search import Search
        cls_name = cls.__name__.lower()
        terms = {cls_name: search_item}
        for kwd in kwds:
            if kwds[kwd] is not None:
                terms[kwd] = kwds[kwd]
        return Search.for_prefix(cls_name)(api, terms, items_per_page)

    cls.search = search
    return cls
