#!/usr/bin/env python
"""Module for calling Artist related last.fm web services API methods"""

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm"

from lastfm.base import LastfmBase
from lastfm.mixin import mixin
from lastfm.decorators import cached_property, top_property
from lastfm.language import SiteLanguage, get_site_domain

@mixin("taggable", "searchable", "property_adder")
class Artist(LastfmBase):
    """A class representing an artist."""
    class Meta(object):
        properties = ["name"]

    def __init__(self, api, name):
        """
        Create an Artist object.

        @param api:             an instance of L{Api}
        @type api:              L{Api}
        @param name:            the artist name
        @type name:             L{str}
        """
        self._api = api
        self._name = name

    def _get_info(self):
        params = self._default_params({'method': 'artist.getInfo'})
        return self._api._fetch_data(params).find('artist')

    def get_mbid(self):
        """
        MusicBrainz id of the artist, None if it has none
        @rtype: L{str}
        """
        return self._get_info().findtext('mbid') or None

    def get_listeners(self):
        return int(self._get_info().findtext('stats/listeners'))

    def get_playcount(self):
        return int(self._get_info().findtext('stats/playcount'))

    def get_image_url(self, size = None):
        """
        Get the url of an image of the artist.

        @param size: 'small', 'medium', 'large' or 'extralarge' (optional).
                     The largest available image is used when not given.
        @type size:  L{str}
        @rtype:      L{str}
        """
        return pick_image(image_urls(self._get_info()), size)

    def is_streamable(self):
        return self._get_info().findtext('streamable') == '1'

    def get_similar(self, limit = None):
        """
        Get the artists similar to this artist.

        @param limit: the number of artists returned (optional)
        @type limit:  L{int}

        @return:      artists similar to this artist
        @rtype:       L{list} of L{Artist}
        """
        params = self._default_params({'method': 'artist.getSimilar', 'limit': limit})
        data = self._api._fetch_data(params)
        return [Artist(self._api, a.findtext('name')) for a in find_all(data, 'artist')]

    @cached_property
    def similar(self):
        """
        artists similar to this artist
        @rtype: L{list} of L{Artist}
        """
        return self.get_similar()

    @top_property("similar")
    def most_similar(self):
        """
        artist most similar to this artist
        @rtype: L{Artist}
        """
        pass

    def get_top_albums(self):
        """
        Get the top albums of the artist, weighted by playcount.
        @rtype: L{list} of L{TopAlbum}
        """
        params = self._default_params({'method': 'artist.getTopAlbums'})
        data = self._api._fetch_data(params)
        return [
                TopAlbum(
                         Album(self._api, self, a.findtext('name')),
                         extract_int(a, 'playcount')
                         )
                for a in find_all(data, 'album')
                ]

    @top_property("top_albums")
    def top_album(self):
        """
        top album of the artist
        @rtype: L{TopAlbum}
        """
        pass

    @property
    def top_albums(self):
        return self.get_top_albums()

    def get_top_tracks(self):
        """
        Get the top tracks of the artist, weighted by playcount.
        @rtype: L{list} of L{TopTrack}
        """
        params = self._default_params({'method': 'artist.getTopTracks'})
        data = self._api._fetch_data(params)
        return [
                TopTrack(
                         Track(self._api, self, t.findtext('name')),
                         extract_int(t, 'playcount')
                         )
                for t in find_all(data, 'track')
                ]

    @property
    def top_tracks(self):
        return self.get_top_tracks()

    @property
    def bio(self):
        """
        biography of the artist
        @rtype: L{ArtistBio}
        """
        return ArtistBio(self)

    def get_url(self, language = SiteLanguage.ENGLISH):
        """
        Get the address of the artist page on the last.fm website.

        @param language: language of the website (optional)
        @type language:  L{SiteLanguage}
        @rtype:          L{str}
        """
        return "http://%s/music/%s" % (get_site_domain(language), url_safe(self.name))

    @property
    def url(self):
        return self.get_url()

    @staticmethod
    def get_by_mbid(api, mbid):
        """
        Get the artist with a MusicBrainz id.
        @rtype: L{Artist}
        """
        data = api._fetch_data({'method': 'artist.getInfo', 'mbid': mbid}).find('artist')
        return Artist(api, data.findtext('name'))

    def _default_params(self, extra_params = None):
        if not self.name:
            raise InvalidParametersError("artist has to be provided.")
        params = {'artist': self.name}
        if extra_params is not None:
            params.update(extra_params)
        return params

    def __str__(self):
        return self.name

    def __hash__(self):
        return hash((self.name or '').lower())

    def __eq__(self, other):
        if isinstance(other, Artist):
            return (self.name or '').lower() == (other.name or '').lower()
        return False

    def __lt__(self, other):
        return self.name < other.name

    def __repr__(self):
        return "<lastfm.Artist: %s>" % self.name

from lastfm.album import Album
from lastfm.error import InvalidParametersError
from lastfm.top import TopAlbum, TopTrack
from lastfm.track import Track
from lastfm.util import extract_int, find_all, image_urls, pick_image, url_safe
from lastfm.wiki import ArtistBio
