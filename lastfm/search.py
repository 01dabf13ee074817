#!/usr/bin/env python
"""Module for the paged search methods of the last.fm web services API"""

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm"

import logging
import math

logger = logging.getLogger('lastfm.search')

class Search(object):
    """
    A search on last.fm. Result pages are fetched on demand, the response of
    the last fetched page is kept to answer the result count.
    """

    def __init__(self, api, prefix, search_terms, items_per_page = 30):
        """
        @param api:             an instance of L{Api}
        @type api:              L{Api}
        @param prefix:          prefix of the search method, like 'tag'
        @type prefix:           L{str}
        @param search_terms:    the search parameters, like {'tag': 'rock'}
        @type search_terms:     L{dict}
        @param items_per_page:  number of results in a page (optional)
        @type items_per_page:   L{int}
        """
        if items_per_page < 1:
            raise InvalidParametersError("items_per_page must be positive")
        self._api = api
        self._prefix = prefix
        self._search_terms = dict(search_terms)
        self._items_per_page = items_per_page
        self._last_doc = None

    @staticmethod
    def for_prefix(prefix):
        """
        Get the search class for a method prefix.
        @rtype: C{type}
        """
        searches = {
            'tag': TagSearch,
            'artist': ArtistSearch,
            'album': AlbumSearch,
            'track': TrackSearch,
        }
        if prefix not in searches:
            raise InvalidParametersError("no search for %s" % prefix)
        return searches[prefix]

    @property
    def search_terms(self):
        return dict(self._search_terms)

    @property
    def items_per_page(self):
        return self._items_per_page

    def _default_params(self, extra_params = None):
        params = dict(self._search_terms)
        params['limit'] = self._items_per_page
        if extra_params is not None:
            params.update(extra_params)
        return params

    def _request_page(self, page):
        if page < 1:
            raise InvalidParametersError("page numbers start at 1")
        params = self._default_params({
                'method': '%s.search' % self._prefix,
                'page': page,
                })
        self._last_doc = self._api._fetch_data(params)
        logger.debug("Fetched page %d of %s search", page, self._prefix)
        return self._last_doc

    def get_page(self, page):
        """
        Get a page of the results.

        @param page:  the page number, starting at 1
        @type page:   L{int}
        @rtype:       L{list}
        """
        return self._parse_page(self._request_page(page))

    def _parse_page(self, data):
        raise NotImplementedError("the subclass should implement this method")

    def get_total_results(self):
        """
        Number of results of the search. The first page is fetched when no
        page has been fetched yet.
        @rtype: L{int}
        """
        if self._last_doc is None:
            self._request_page(1)
        text = self._last_doc.findtext(
                'results/{%s}totalResults' % Api.SEARCH_XMLNS)
        return int(text or 0)

    def get_pages_count(self):
        """
        Number of result pages of the search.
        @rtype: L{int}
        """
        return int(math.ceil(self.get_total_results() / float(self._items_per_page)))

    def __iter__(self):
        for item in self.get_page(1):
            yield item
        for page in range(2, self.get_pages_count() + 1):
            for item in self.get_page(page):
                yield item

    def __repr__(self):
        return "<lastfm.%s: %s>" % (self.__class__.__name__, self._search_terms)

class TagSearch(Search):
    """A search for tags by name"""

    def __init__(self, api, search_terms, items_per_page = 30):
        super(TagSearch, self).__init__(api, 'tag', search_terms, items_per_page)

    def _parse_page(self, data):
        return [Tag(self._api, t.findtext('name')) for t in find_all(data, 'tag')]

class ArtistSearch(Search):
    """A search for artists by name"""

    def __init__(self, api, search_terms, items_per_page = 30):
        super(ArtistSearch, self).__init__(api, 'artist', search_terms, items_per_page)

    def _parse_page(self, data):
        return [Artist(self._api, a.findtext('name')) for a in find_all(data, 'artist')]

class AlbumSearch(Search):
    """A search for albums by title"""

    def __init__(self, api, search_terms, items_per_page = 30):
        super(AlbumSearch, self).__init__(api, 'album', search_terms, items_per_page)

    def _parse_page(self, data):
        return [
                Album(self._api, a.findtext('artist'), a.findtext('name'))
                for a in find_all(data, 'album')
                ]

class TrackSearch(Search):
    """A search for tracks by title, optionally narrowed to an artist"""

    def __init__(self, api, search_terms, items_per_page = 30):
        super(TrackSearch, self).__init__(api, 'track', search_terms, items_per_page)

    def _parse_page(self, data):
        return [
                Track(self._api, t.findtext('artist'), t.findtext('name'))
                for t in find_all(data, 'track')
                ]

from lastfm.album import Album
from lastfm.api import Api
from lastfm.artist import Artist
from lastfm.error import InvalidParametersError
from lastfm.tag import Tag
from lastfm.track import Track
from lastfm.util import find_all
