#!/usr/bin/env python
"""Module for calling Track related last.fm web services API methods"""

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm"

import logging

from lastfm.base import LastfmBase
from lastfm.mixin import mixin
from lastfm.decorators import authentication_required, cached_property, top_property
from lastfm.language import SiteLanguage, get_site_domain

logger = logging.getLogger('lastfm.track')

@mixin("taggable", "searchable", "property_adder")
class Track(LastfmBase):
    """A class representing a track."""
    class Meta(object):
        properties = ["artist", "title"]

    def __init__(self, api, artist, title):
        """
        @param api:     an instance of L{Api}
        @type api:      L{Api}
        @param artist:  the track artist
        @type artist:   L{Artist} OR L{str}
        @param title:   the track title
        @type title:    L{str}
        """
        self._api = api
        if not isinstance(artist, Artist):
            artist = Artist(api, artist)
        self._artist = artist
        self._title = title

    @property
    def artist_name(self):
        return self.artist.name

    @property
    def name(self):
        return self.title

    def _get_info(self):
        params = self._default_params({'method': 'track.getInfo'})
        return self._api._fetch_data(params).find('track')

    def get_id(self):
        return extract_int(self._get_info(), 'id')

    def get_mbid(self):
        return self._get_info().findtext('mbid') or None

    def get_duration(self):
        """
        Get the length of the track.
        @return: the duration in milliseconds, None if unknown
        @rtype:  L{int}
        """
        return extract_int(self._get_info(), 'duration') or None

    def get_listeners(self):
        return extract_int(self._get_info(), 'listeners')

    def get_playcount(self):
        return extract_int(self._get_info(), 'playcount')

    def get_album(self):
        """
        Get the album the track appears on, None if last.fm does not know it.
        @rtype: L{Album}
        """
        album = self._get_info().find('album')
        if album is None:
            return None
        return Album(self._api, album.findtext('artist'), album.findtext('title'))

    def get_similar(self):
        """
        Get the tracks similar to this track.
        @rtype: L{list} of L{Track}
        """
        params = self._default_params({'method': 'track.getSimilar'})
        data = self._api._fetch_data(params)
        return [
                Track(self._api, t.findtext('artist/name'), t.findtext('name'))
                for t in find_all(data, 'track')
                ]

    @cached_property
    def similar(self):
        """tracks similar to this track"""
        return self.get_similar()

    @top_property("similar")
    def most_similar(self):
        """track most similar to this track"""
        pass

    @property
    def wiki(self):
        """
        wiki of the track
        @rtype: L{TrackWiki}
        """
        return TrackWiki(self)

    @authentication_required
    def love(self):
        """Love this track in the profile of the authenticated user."""
        params = self._default_params({'method': 'track.love'})
        self._api._post_data(params)
        logger.debug("Loved %r", self)

    @authentication_required
    def ban(self):
        """Ban this track from the radio of the authenticated user."""
        params = self._default_params({'method': 'track.ban'})
        self._api._post_data(params)
        logger.debug("Banned %r", self)

    def get_url(self, language = SiteLanguage.ENGLISH):
        return "http://%s/music/%s/_/%s" % (get_site_domain(language),
                                            url_safe(self.artist_name),
                                            url_safe(self.title))

    @property
    def url(self):
        return self.get_url()

    def _default_params(self, extra_params = None):
        if not (self.artist_name and self.title):
            raise InvalidParametersError("artist and track have to be provided.")
        params = {'artist': self.artist_name, 'track': self.title}
        if extra_params is not None:
            params.update(extra_params)
        return params

    def __str__(self):
        return "%s - %s" % (self.artist_name, self.title)

    def __hash__(self):
        return hash((self.artist, (self.title or '').lower()))

    def __eq__(self, other):
        if isinstance(other, Track):
            return self.artist == other.artist and \
                (self.title or '').lower() == (other.title or '').lower()
        return False

    def __lt__(self, other):
        return self.title < other.title

    def __repr__(self):
        return "<lastfm.Track: '%s' by %s>" % (self.title, self.artist_name)

from lastfm.album import Album
from lastfm.artist import Artist
from lastfm.error import InvalidParametersError
from lastfm.util import extract_int, find_all, url_safe
from lastfm.wiki import TrackWiki
