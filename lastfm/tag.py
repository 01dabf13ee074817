#!/usr/bin/env python
"""Module for calling Tag related last.fm web services API methods"""

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm"

from lastfm.base import LastfmBase
from lastfm.mixin import mixin, chartable
from lastfm.decorators import cached_property, top_property
from lastfm.language import SiteLanguage, get_site_domain

@chartable("artist")
@mixin("searchable", "property_adder")
class Tag(LastfmBase):
    """A class representing a tag."""
    class Meta(object):
        properties = ["name"]

    def __init__(self, api, name):
        """
        @param api:   an instance of L{Api}
        @type api:    L{Api}
        @param name:  the tag name
        @type name:   L{str}

        @raise InvalidParametersError: If the name is empty.
        """
        if not name:
            raise InvalidParametersError("tag has to be provided.")
        self._api = api
        self._name = name

    def get_similar(self):
        """
        Get the tags similar to this tag.
        @rtype: L{list} of L{Tag}
        """
        params = self._default_params({'method': 'tag.getSimilar'})
        data = self._api._fetch_data(params)
        return [Tag(self._api, name) for name in extract_all(data, 'name') if name]

    @cached_property
    def similar(self):
        """tags similar to this tag"""
        return self.get_similar()

    @top_property("similar")
    def most_similar(self):
        """most similar tag to this tag"""
        pass

    def get_top_albums(self):
        """
        Get the top albums tagged with this tag.
        @rtype: L{list} of L{TopAlbum}
        """
        params = self._default_params({'method': 'tag.getTopAlbums'})
        data = self._api._fetch_data(params)
        return [
                TopAlbum(
                         Album(self._api, extract(a, 'name', 1), extract(a, 'name')),
                         extract_int(a, 'tagcount')
                         )
                for a in find_all(data, 'album')
                ]

    @cached_property
    def top_albums(self):
        """top albums for the tag"""
        return self.get_top_albums()

    def get_top_artists(self):
        """
        Get the top artists tagged with this tag.
        @rtype: L{list} of L{TopArtist}
        """
        params = self._default_params({'method': 'tag.getTopArtists'})
        data = self._api._fetch_data(params)
        return [
                TopArtist(
                          Artist(self._api, extract(a, 'name')),
                          extract_int(a, 'tagcount')
                          )
                for a in find_all(data, 'artist')
                ]

    @cached_property
    def top_artists(self):
        """top artists for the tag"""
        return self.get_top_artists()

    def get_top_tracks(self):
        """
        Get the top tracks tagged with this tag.
        @rtype: L{list} of L{TopTrack}
        """
        params = self._default_params({'method': 'tag.getTopTracks'})
        data = self._api._fetch_data(params)
        return [
                TopTrack(
                         Track(self._api, extract(t, 'name', 1), extract(t, 'name')),
                         extract_int(t, 'tagcount')
                         )
                for t in find_all(data, 'track')
                ]

    @cached_property
    def top_tracks(self):
        """top tracks for the tag"""
        return self.get_top_tracks()

    def get_url(self, language = SiteLanguage.ENGLISH):
        """
        Get the address of the tag page on the last.fm website.

        @param language: language of the website (optional)
        @type language:  L{SiteLanguage}
        @rtype:          L{str}
        """
        return "http://%s/tag/%s" % (get_site_domain(language), url_safe(self.name))

    @property
    def url(self):
        """url of the tag page on the english website"""
        return self.get_url()

    @staticmethod
    def get_top_tags(api):
        """
        Get the most used tags on last.fm.
        @rtype: L{list} of L{Tag}
        """
        params = {'method': 'tag.getTopTags'}
        data = api._fetch_data(params)
        return [Tag(api, t.findtext('name')) for t in data.iter('tag')]

    def _default_params(self, extra_params = None):
        params = {'tag': self.name}
        if extra_params is not None:
            params.update(extra_params)
        return params

    def __str__(self):
        return self.name

    def __hash__(self):
        return hash(self.name.lower())

    def __eq__(self, other):
        if isinstance(other, Tag):
            return self.name.lower() == other.name.lower()
        return False

    def __lt__(self, other):
        return self.name.lower() < other.name.lower()

    def __repr__(self):
        return "<lastfm.Tag: %s>" % self.name

from lastfm.album import Album
from lastfm.artist import Artist
from lastfm.error import InvalidParametersError
from lastfm.top import TopAlbum, TopArtist, TopTrack
from lastfm.track import Track
from lastfm.util import extract, extract_all, extract_int, find_all, url_safe
