#!/usr/bin/env python

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm.util"

from datetime import datetime, timezone
from urllib.parse import quote_plus
import calendar

def timestamp_to_datetime(timestamp):
    """Convert UNIX seconds (int or numeric string) to an aware UTC datetime."""
    return datetime.fromtimestamp(int(timestamp), tz = timezone.utc)

def datetime_to_timestamp(dt):
    """
    Convert a datetime to UNIX seconds. Naive datetimes are taken to be in UTC.
    @rtype: L{int}
    """
    return int(calendar.timegm(dt.utctimetuple()))

def url_safe(text):
    """
    Encode text the way last.fm encodes names in its website URLs, which is
    URL encoding applied twice ("AC/DC" becomes "AC%252FDC").
    """
    return quote_plus(quote_plus(text))
