#!/usr/bin/env python

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm"

from lastfm.base import LastfmBase
from lastfm.mixin import mixin
from lastfm.decorators import cached_property, top_property
from lastfm.language import SiteLanguage, get_site_domain

@mixin("property_adder")
class Country(LastfmBase):
    """A class representing a country."""

    class Meta(object):
        properties = ["name"]

    def __init__(self, api, name):
        """
        Create a Country object.
        @param api:    an instance of L{Api}
        @type api:     L{Api}
        @param name:   name of the country, as defined by ISO 3166-1
        @type name:    L{str}
        """
        self._api = api
        self._name = name

    def get_top_artists(self):
        """
        Get the most popular artists in the country, weighted by playcount.
        @rtype: L{list} of L{TopArtist}
        """
        params = self._default_params({'method': 'geo.getTopArtists'})
        data = self._api._fetch_data(params)
        return [
                TopArtist(Artist(self._api, a.findtext('name')), extract_int(a, 'playcount'))
                for a in find_all(data, 'artist')
                ]

    @cached_property
    def top_artists(self):
        """
        top artists of the country
        @rtype: L{list} of L{TopArtist}
        """
        return self.get_top_artists()

    @top_property("top_artists")
    def top_artist(self):
        """
        top artist of the country
        @rtype: L{TopArtist}
        """
        pass

    def get_top_tracks(self):
        """
        Get the most popular tracks in the country, weighted by playcount.
        @rtype: L{list} of L{TopTrack}
        """
        params = self._default_params({'method': 'geo.getTopTracks'})
        data = self._api._fetch_data(params)
        return [
                TopTrack(
                         Track(self._api, t.findtext('artist/name'), t.findtext('name')),
                         extract_int(t, 'playcount')
                         )
                for t in find_all(data, 'track')
                ]

    @cached_property
    def top_tracks(self):
        return self.get_top_tracks()

    def get_url(self, language = SiteLanguage.ENGLISH):
        return "http://%s/place/%s" % (get_site_domain(language), url_safe(self.name))

    @property
    def url(self):
        return self.get_url()

    def _default_params(self, extra_params = None):
        if not self.name:
            raise InvalidParametersError("country has to be provided.")
        params = {'country': self.name}
        if extra_params is not None:
            params.update(extra_params)
        return params

    def __str__(self):
        return self.name

    def __hash__(self):
        return hash(self.name.lower())

    def __eq__(self, other):
        if isinstance(other, Country):
            return self.name.lower() == other.name.lower()
        return False

    def __lt__(self, other):
        return self.name < other.name

    def __repr__(self):
        return "<lastfm.geo.Country: %s>" % self.name

from lastfm.artist import Artist
from lastfm.error import InvalidParametersError
from lastfm.top import TopArtist, TopTrack
from lastfm.track import Track
from lastfm.util import extract_int, find_all, url_safe
