#!/usr/bin/env python
"""Module for calling User related last.fm web services API methods"""

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm"

from enum import Enum
import logging

from lastfm.base import LastfmBase
from lastfm.mixin import chartable, mixin
from lastfm.decorators import authentication_required, cached_property, top_property
from lastfm.language import SiteLanguage, get_site_domain

logger = logging.getLogger('lastfm.user')

PERIOD_OVERALL = 'overall'
PERIOD_7DAYS = '7day'
PERIOD_3MONTHS = '3month'
PERIOD_6MONTHS = '6month'
PERIOD_12MONTHS = '12month'

PERIODS = [PERIOD_OVERALL, PERIOD_7DAYS, PERIOD_3MONTHS, PERIOD_6MONTHS, PERIOD_12MONTHS]
"""Time periods the top lists of an user can cover"""

class Gender(Enum):
    """Gender of an user"""
    MALE = 'm'
    FEMALE = 'f'
    UNSPECIFIED = ''

    @staticmethod
    def from_code(code):
        """
        Get the gender for a code sent by last.fm, anything but 'm' and 'f'
        is unspecified.
        """
        if code == 'm':
            return Gender.MALE
        elif code == 'f':
            return Gender.FEMALE
        return Gender.UNSPECIFIED

@chartable("album", "artist", "track")
@mixin("property_adder")
class User(LastfmBase):
    """A class representing an user."""

    class Meta(object):
        properties = ["name"]

    def __init__(self, api, name):
        """
        @param api:   an instance of L{Api}
        @type api:    L{Api}
        @param name:  the user name
        @type name:   L{str}
        """
        self._api = api
        self._name = name

    def get_top_artists(self, period = None):
        """
        Get the most played artists of the user.

        @param period:  one of L{PERIODS}, overall when not given (optional)
        @type period:   L{str}
        @rtype:         L{list} of L{TopArtist}
        """
        params = self._period_params('user.getTopArtists', period)
        data = self._api._fetch_data(params)
        return [
                TopArtist(Artist(self._api, a.findtext('name')), extract_int(a, 'playcount'))
                for a in find_all(data, 'artist')
                ]

    @cached_property
    def top_artists(self):
        """overall top artists of the user"""
        return self.get_top_artists()

    @top_property("top_artists")
    def top_artist(self):
        """overall top most artist of the user"""
        pass

    def get_top_albums(self, period = None):
        params = self._period_params('user.getTopAlbums', period)
        data = self._api._fetch_data(params)
        return [
                TopAlbum(
                         Album(self._api, a.findtext('artist/name'), a.findtext('name')),
                         extract_int(a, 'playcount')
                         )
                for a in find_all(data, 'album')
                ]

    @cached_property
    def top_albums(self):
        """overall top albums of the user"""
        return self.get_top_albums()

    def get_top_tracks(self, period = None):
        params = self._period_params('user.getTopTracks', period)
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
        """overall top tracks of the user"""
        return self.get_top_tracks()

    def get_top_tags(self, limit = None):
        """
        Get the tags the user used most, weighted by the number of uses.
        @rtype: L{list} of L{TopTag}
        """
        params = self._default_params({'method': 'user.getTopTags', 'limit': limit})
        data = self._api._fetch_data(params)
        return [
                TopTag(Tag(self._api, t.findtext('name')), extract_int(t, 'count'))
                for t in find_all(data, 'tag')
                ]

    def get_friends(self, limit = None):
        params = self._default_params({'method': 'user.getFriends', 'limit': limit})
        data = self._api._fetch_data(params)
        return [User(self._api, u.findtext('name')) for u in find_all(data, 'user')]

    @cached_property
    def friends(self):
        """friends of the user"""
        return self.get_friends()

    def get_neighbours(self, limit = None):
        params = self._default_params({'method': 'user.getNeighbours', 'limit': limit})
        data = self._api._fetch_data(params)
        return [User(self._api, u.findtext('name')) for u in find_all(data, 'user')]

    @cached_property
    def neighbours(self):
        """neighbours of the user"""
        return self.get_neighbours()

    @top_property("neighbours")
    def nearest_neighbour(self):
        """nearest neighbour of the user"""
        pass

    def get_loved_tracks(self):
        """
        Get the last 50 tracks loved by the user.
        @rtype: L{list} of L{Track}
        """
        params = self._default_params({'method': 'user.getLovedTracks'})
        data = self._api._fetch_data(params)
        return [
                Track(self._api, t.findtext('artist/name'), t.findtext('name'))
                for t in find_all(data, 'track')
                ]

    def get_recent_tracks(self, limit = None):
        """
        Get the tracks recently played by the user, most recent first.
        @rtype: L{list} of L{Track}
        """
        params = self._default_params({'method': 'user.getRecentTracks', 'limit': limit})
        data = self._api._fetch_data(params)
        return [
                Track(self._api, t.findtext('artist'), t.findtext('name'))
                for t in find_all(data, 'track')
                ]

    def get_url(self, language = SiteLanguage.ENGLISH):
        return "http://%s/user/%s" % (get_site_domain(language), url_safe(self.name))

    @property
    def url(self):
        return self.get_url()

    def _period_params(self, method, period):
        if period is not None and period not in PERIODS:
            raise InvalidParametersError("period must be one of %s" % ", ".join(PERIODS))
        return self._default_params({'method': method, 'period': period})

    def _default_params(self, extra_params = None):
        if not self.name:
            raise InvalidParametersError("user has to be provided.")
        params = {'user': self.name}
        if extra_params is not None:
            params.update(extra_params)
        return params

    def __str__(self):
        return self.name

    def __hash__(self):
        return hash(self.name.lower())

    def __eq__(self, other):
        if isinstance(other, User):
            return self.name.lower() == other.name.lower()
        return False

    def __lt__(self, other):
        return self.name < other.name

    def __repr__(self):
        return "<lastfm.User: %s>" % self.name

class AuthenticatedUser(User):
    """
    The user owning the session key of an L{Api}. Use L{get_user} to get
    one. Every accessor fetches the user info again.
    """

    @staticmethod
    def get_user(api):
        """
        Get the authenticated user of the session of api.

        @param api:  an authenticated instance of L{Api}
        @type api:   L{Api}
        @rtype:      L{AuthenticatedUser}

        @raise AuthenticationRequiredError: If api has no session key. Checked
                                            before any request is sent.
        """
        if not api.authenticated:
            raise AuthenticationRequiredError()

        data = api._fetch_data({'method': 'user.getInfo'}, sign = True, session = True)
        name = extract(data, 'name')
        logger.debug("Authenticated as %s", name)
        return AuthenticatedUser(api, name)

    def _get_info(self):
        params = self._default_params({'method': 'user.getInfo'})
        return self._api._fetch_data(params, sign = True, session = True)

    def get_image_url(self):
        """
        url of the avatar of the user
        @rtype: L{str}
        """
        return extract(self._get_info(), 'image') or None

    def get_language_code(self):
        """
        ISO 639 alpha-2 code of the language of the user
        @rtype: L{str}
        """
        return extract(self._get_info(), 'lang')

    def get_country(self):
        """
        country of the user, None if not given
        @rtype: L{Country}
        """
        name = extract(self._get_info(), 'country')
        if not name:
            return None
        return Country(self._api, name)

    def get_age(self):
        """
        age of the user, None if not given
        @rtype: L{int}
        """
        return extract_int(self._get_info(), 'age')

    def get_gender(self):
        """
        gender of the user
        @rtype: L{Gender}
        """
        return Gender.from_code(extract(self._get_info(), 'gender'))

    def is_subscriber(self):
        """
        whether the user is a paying subscriber
        @rtype: L{bool}
        """
        return extract(self._get_info(), 'subscriber') == '1'

    def get_playcount(self):
        """
        number of tracks played by the user
        @rtype: L{int}
        """
        return extract_int(self._get_info(), 'playcount')

    @authentication_required
    def get_recommended_events(self, limit = 20, page = 1):
        """
        Get the events last.fm recommends to the user.

        @param limit: number of events per page (optional)
        @type limit:  L{int}
        @param page:  the page to fetch (optional)
        @type page:   L{int}
        @rtype:       L{list} of L{Event}
        """
        params = self._default_params({
                'method': 'user.getRecommendedEvents',
                'limit': limit,
                'page': page,
                })
        data = self._api._fetch_data(params, sign = True, session = True)
        return [Event.create_from_data(self._api, e) for e in find_all(data, 'event')]

    def __repr__(self):
        return "<lastfm.AuthenticatedUser: %s>" % self.name

from lastfm.album import Album
from lastfm.artist import Artist
from lastfm.error import AuthenticationRequiredError, InvalidParametersError
from lastfm.event import Event
from lastfm.geo import Country
from lastfm.tag import Tag
from lastfm.top import TopAlbum, TopArtist, TopTag, TopTrack
from lastfm.track import Track
from lastfm.util import extract, extract_int, find_all, url_safe
