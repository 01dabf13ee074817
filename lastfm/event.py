#!/usr/bin/env python

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm"

from datetime import datetime
import logging

from lastfm.base import LastfmBase
from lastfm.mixin import mixin
from lastfm.language import SiteLanguage, get_site_domain

logger = logging.getLogger('lastfm.event')

START_DATE_FORMAT = '%a, %d %b %Y %H:%M:%S'
"""Format of event start dates, like 'Thu, 12 Mar 2009 20:00:00'"""

def _parse_start_date(text):
    text = (text or '').strip()
    if not text:
        return None
    try:
        return datetime.strptime(text, START_DATE_FORMAT)
    except ValueError:
        logger.warning("Unknown event start date format: %s", text)
        return None

@mixin("property_adder")
class Event(LastfmBase):
    """A class representing an event."""
    class Meta(object):
        properties = ["id", "title", "url", "start_date"]

    def __init__(self, api, id, title = None, url = None, start_date = None):
        """
        @param api:         an instance of L{Api}
        @type api:          L{Api}
        @param id:          ID of the event
        @type id:           L{int}
        @param title:       title of the event (optional)
        @type title:        L{str}
        @param url:         url of the event page on last.fm (optional)
        @type url:          L{str}
        @param start_date:  start date of the event (optional)
        @type start_date:   C{datetime.datetime}
        """
        self._api = api
        self._id = id
        self._title = title
        self._url = url
        self._start_date = start_date

    @staticmethod
    def create_from_data(api, data):
        start_date = _parse_start_date(data.findtext('startDate'))
        return Event(
                     api,
                     id = int(data.findtext('id')),
                     title = data.findtext('title'),
                     url = data.findtext('url'),
                     start_date = start_date,
                     )

    def get_url(self, language = SiteLanguage.ENGLISH):
        return "http://%s/event/%s" % (get_site_domain(language), self.id)

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if isinstance(other, Event):
            return self.id == other.id
        return False

    def __lt__(self, other):
        return self.start_date < other.start_date

    def __repr__(self):
        return "<lastfm.Event: %s (%s)>" % (self.title, self.id)
