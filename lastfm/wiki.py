#!/usr/bin/env python

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm"

from datetime import datetime
import logging

from lastfm.mixin import mixin

logger = logging.getLogger('lastfm.wiki')

PUBLISHED_DATE_FORMATS = ['%a, %d %b %Y %H:%M:%S %z', '%d %b %Y, %H:%M']
"""Formats last.fm has used for the publication dates of wikis"""

@mixin("property_adder")
class Wiki(object):
    """
    A class representing the information from the wiki of the subject.
    The wiki is fetched again on every call, from the C{getInfo} method of
    its section.
    """

    class Meta(object):
        properties = ["subject"]

    section = None
    """prefix of the getInfo method, like 'album'"""

    node = 'wiki'
    """name of the node holding the wiki in the getInfo response"""

    def __init__(self, subject):
        self._subject = subject
        self._api = subject._api

    def _default_params(self):
        return {'method': '%s.getInfo' % self.section}

    def _get_wiki(self):
        data = self._api._fetch_data(self._default_params())
        return data.find('%s/%s' % (self.section, self.node))

    def _get_field(self, name):
        wiki = self._get_wiki()
        if wiki is None:
            return None
        text = wiki.findtext(name)
        return text and text.strip() or None

    def get_summary(self):
        """
        short summary of the wiki
        @rtype: L{str}
        """
        return self._get_field('summary')

    def get_content(self):
        """
        full text of the wiki
        @rtype: L{str}
        """
        return self._get_field('content')

    def get_published_date(self):
        """
        date the current version of the wiki was published, None if unknown
        @rtype: C{datetime.datetime}
        """
        text = self._get_field('published')
        if text is None:
            return None
        for fmt in PUBLISHED_DATE_FORMATS:
            try:
                return datetime.strptime(text, fmt)
            except ValueError:
                continue
        logger.warning("Unknown wiki publication date format: %s", text)
        return None

    def __repr__(self):
        return "<lastfm.%s: for %s>" % (self.__class__.__name__, self.subject)

class AlbumWiki(Wiki):
    """The wiki of an album"""
    section = 'album'

    def _default_params(self):
        params = super(AlbumWiki, self)._default_params()
        params['artist'] = self.subject.artist_name
        params['album'] = self.subject.title
        return params

class ArtistBio(Wiki):
    """The biography of an artist"""
    section = 'artist'
    node = 'bio'

    def _default_params(self):
        params = super(ArtistBio, self)._default_params()
        params['artist'] = self.subject.name
        return params

class TrackWiki(Wiki):
    """The wiki of a track"""
    section = 'track'

    def _default_params(self):
        params = super(TrackWiki, self)._default_params()
        params['artist'] = self.subject.artist_name
        params['track'] = self.subject.title
        return params
