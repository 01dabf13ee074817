#!/usr/bin/env python
"""
A python interface to the last.fm web services API at
U{http://ws.audioscrobbler.com/2.0}.
See U{the official documentation<http://www.last.fm/api/intro>}
of the web service API methods for more information.
"""

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm"

import logging

logger = logging.getLogger('lastfm')
logger.addHandler(logging.NullHandler())

from lastfm.album import Album
from lastfm.api import Api
from lastfm.artist import Artist
from lastfm.chart import WeeklyChartTimeSpan, WeeklyArtistChart, WeeklyAlbumChart, WeeklyTrackChart
from lastfm.config import Settings, load_configuration
from lastfm.error import LastfmError, AuthenticationRequiredError, NetworkError
from lastfm.event import Event
from lastfm.geo import Country
from lastfm.language import SiteLanguage
from lastfm.search import Search, TagSearch, ArtistSearch, AlbumSearch, TrackSearch
from lastfm.tag import Tag
from lastfm.track import Track
from lastfm.user import User, AuthenticatedUser, Gender
from lastfm.wiki import AlbumWiki, ArtistBio, TrackWiki

__all__ = ['LastfmError', 'AuthenticationRequiredError', 'NetworkError',
           'Api', 'Album', 'Artist', 'Event', 'Country', 'Tag', 'Track',
           'User', 'AuthenticatedUser', 'Gender', 'SiteLanguage',
           'Search', 'TagSearch', 'ArtistSearch', 'AlbumSearch', 'TrackSearch',
           'WeeklyChartTimeSpan', 'WeeklyArtistChart', 'WeeklyAlbumChart',
           'WeeklyTrackChart', 'AlbumWiki', 'ArtistBio', 'TrackWiki',
           'Settings', 'load_configuration']
