#!/usr/bin/env python
"""Module for calling Album related last.fm web services API methods"""

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm"

from datetime import datetime

from lastfm.base import LastfmBase
from lastfm.mixin import mixin
from lastfm.language import SiteLanguage, get_site_domain

@mixin("taggable", "searchable", "property_adder")
class Album(LastfmBase):
    """A class representing an album."""
    class Meta(object):
        properties = ["artist", "title"]

    def __init__(self, api, artist, title):
        """
        Create an Album object.

        @param api:             an instance of L{Api}
        @type api:              L{Api}
        @param artist:          the album artist
        @type artist:           L{Artist} OR L{str}
        @param title:           the album title
        @type title:            L{str}
        """
        self._api = api
        if not isinstance(artist, Artist):
            artist = Artist(api, artist)
        self._artist = artist
        self._title = title

    @property
    def artist_name(self):
        """
        name of the album artist
        @rtype: L{str}
        """
        return self.artist.name

    @property
    def name(self):
        return self.title

    def _get_info(self):
        params = self._default_params({'method': 'album.getInfo'})
        return self._api._fetch_data(params).find('album')

    def get_id(self):
        """
        last.fm id of the album
        @rtype: L{int}
        """
        return extract_int(self._get_info(), 'id')

    def get_mbid(self):
        return self._get_info().findtext('mbid') or None

    def get_release_date(self):
        """
        Get the release date of the album, None when last.fm does not know it.
        @rtype: C{datetime.datetime}
        """
        text = (self._get_info().findtext('releasedate') or '').strip()
        if not text:
            return None
        return datetime.strptime(text, RELEASE_DATE_FORMAT)

    def get_listeners(self):
        return extract_int(self._get_info(), 'listeners')

    def get_playcount(self):
        return extract_int(self._get_info(), 'playcount')

    def get_image_url(self, size = None):
        """
        Get the url of a cover image.

        @param size: 'small', 'medium', 'large' or 'extralarge' (optional).
                     The largest available image is used when not given.
        @type size:  L{str}
        @rtype:      L{str}
        """
        return pick_image(image_urls(self._get_info()), size)

    @property
    def wiki(self):
        """
        wiki of the album
        @rtype: L{AlbumWiki}
        """
        return AlbumWiki(self)

    def get_url(self, language = SiteLanguage.ENGLISH):
        return "http://%s/music/%s/%s" % (get_site_domain(language),
                                          url_safe(self.artist_name),
                                          url_safe(self.title))

    @property
    def url(self):
        return self.get_url()

    @staticmethod
    def get_by_mbid(api, mbid):
        """
        Get the album with a MusicBrainz id.
        @rtype: L{Album}
        """
        data = api._fetch_data({'method': 'album.getInfo', 'mbid': mbid}).find('album')
        return Album(api, data.findtext('artist'), data.findtext('name'))

    def _default_params(self, extra_params = None):
        if not (self.artist_name and self.title):
            raise InvalidParametersError("artist and album have to be provided.")
        params = {'artist': self.artist_name, 'album': self.title}
        if extra_params is not None:
            params.update(extra_params)
        return params

    def __str__(self):
        return "%s - %s" % (self.artist_name, self.title)

    def __hash__(self):
        return hash((self.artist, (self.title or '').lower()))

    def __eq__(self, other):
        if isinstance(other, Album):
            return self.artist == other.artist and \
                (self.title or '').lower() == (other.title or '').lower()
        return False

    def __lt__(self, other):
        return self.title < other.title

    def __repr__(self):
        return "<lastfm.Album: '%s' by %s>" % (self.title, self.artist_name)

RELEASE_DATE_FORMAT = '%d %b %Y, %H:%M'
"""Format of the release dates sent by last.fm, like '6 Apr 1999, 00:00'"""

from lastfm.artist import Artist
from lastfm.error import InvalidParametersError
from lastfm.util import extract_int, image_urls, pick_image, url_safe
from lastfm.wiki import AlbumWiki
