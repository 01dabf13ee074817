#!/usr/bin/env python
"""Weekly charts of tags and users"""

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm"

from lastfm.base import LastfmBase
from lastfm.mixin import mixin

@mixin("property_adder")
class WeeklyChartTimeSpan(LastfmBase):
    """A week for which last.fm has a chart"""
    class Meta(object):
        properties = ["from_date", "to_date"]

    def __init__(self, from_date, to_date):
        """
        @param from_date: start of the week
        @type from_date:  C{datetime.datetime}
        @param to_date:   end of the week
        @type to_date:    C{datetime.datetime}
        """
        self._from_date = from_date
        self._to_date = to_date

    @staticmethod
    def create_from_data(data):
        return WeeklyChartTimeSpan(
                     timestamp_to_datetime(data.get('from')),
                     timestamp_to_datetime(data.get('to'))
                     )

    def __hash__(self):
        return hash((self.from_date, self.to_date))

    def __eq__(self, other):
        if not isinstance(other, WeeklyChartTimeSpan):
            return False
        return self.from_date == other.from_date and self.to_date == other.to_date

    def __lt__(self, other):
        if self.from_date == other.from_date:
            return self.to_date < other.to_date
        return self.from_date < other.from_date

    def __repr__(self):
        return "<lastfm.WeeklyChartTimeSpan: from %s to %s>" % \
            (self.from_date.strftime("%x"), self.to_date.strftime("%x"))

@mixin("property_adder")
class WeeklyChartItem(LastfmBase):
    """An entry of a weekly chart"""
    class Meta(object):
        properties = ["rank", "playcount", "span"]

    def __init__(self, rank, playcount, span):
        self._rank = rank
        self._playcount = playcount
        self._span = span

    def __eq__(self, other):
        return self.span == other.span and self.rank == other.rank

    def __lt__(self, other):
        return self.rank < other.rank

    __hash__ = None

@mixin("property_adder")
class WeeklyArtistChartItem(WeeklyChartItem):
    class Meta(object):
        properties = ["artist"]

    def __init__(self, artist, rank, playcount, span):
        super(WeeklyArtistChartItem, self).__init__(rank, playcount, span)
        self._artist = artist

    def __repr__(self):
        return "<lastfm.WeeklyArtistChartItem: #%s %s (%s)>" % \
            (self.rank, self.artist.name, self.playcount)

@mixin("property_adder")
class WeeklyAlbumChartItem(WeeklyChartItem):
    class Meta(object):
        properties = ["album"]

    def __init__(self, album, rank, playcount, span):
        super(WeeklyAlbumChartItem, self).__init__(rank, playcount, span)
        self._album = album

    def __repr__(self):
        return "<lastfm.WeeklyAlbumChartItem: #%s '%s' by %s (%s)>" % \
            (self.rank, self.album.title, self.album.artist.name, self.playcount)

@mixin("property_adder")
class WeeklyTrackChartItem(WeeklyChartItem):
    class Meta(object):
        properties = ["track"]

    def __init__(self, track, rank, playcount, span):
        super(WeeklyTrackChartItem, self).__init__(rank, playcount, span)
        self._track = track

    def __repr__(self):
        return "<lastfm.WeeklyTrackChartItem: #%s '%s' by %s (%s)>" % \
            (self.rank, self.track.title, self.track.artist.name, self.playcount)

@mixin("property_adder")
class WeeklyChart(LastfmBase):
    """The base class for the weekly charts, an ordered list of chart items"""
    class Meta(object):
        properties = ["subject", "span", "items"]

    item_tag = None

    def __init__(self, subject, span, items = None):
        self._subject = subject
        self._span = span
        self._items = list(items or [])

    @staticmethod
    def for_type(chart_type):
        return {
                'album': WeeklyAlbumChart,
                'artist': WeeklyArtistChart,
                'track': WeeklyTrackChart,
                }[chart_type]

    @staticmethod
    def _check_chart_params(params, span = None):
        if span is not None:
            if not isinstance(span, WeeklyChartTimeSpan):
                raise InvalidParametersError("span must be a WeeklyChartTimeSpan")
            params.update({
                           'from': datetime_to_timestamp(span.from_date),
                           'to': datetime_to_timestamp(span.to_date)
                           })
        return params

    @classmethod
    def create_from_data(cls, api, subject, data):
        if data is None:
            raise OperationFailedError("no %s in the response" % cls.__name__.lower())
        span = WeeklyChartTimeSpan.create_from_data(data)
        chart = cls(subject, span)
        for node in data.findall(cls.item_tag):
            rank = int(node.get('rank'))
            count = node.findtext('playcount')
            if count is None:
                count = node.findtext('weight')
            playcount = count and int(float(count)) or 0
            chart._items.append(cls._create_item(api, node, rank, playcount, span))
        return chart

    @staticmethod
    def _create_item(api, node, rank, playcount, span):
        raise NotImplementedError("the subclass should implement this method")

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, i):
        return self._items[i]

    def __eq__(self, other):
        return self.subject == other.subject and self.span == other.span

    def __lt__(self, other):
        return self.span < other.span

    __hash__ = None

    def __repr__(self):
        return "<lastfm.%s: for %s:%s from %s to %s>" % \
            (
             self.__class__.__name__,
             self.subject.__class__.__name__,
             self.subject.name,
             self.span.from_date.strftime("%x"),
             self.span.to_date.strftime("%x"),
            )

class WeeklyArtistChart(WeeklyChart):
    """A class for representing the weekly artist charts"""
    item_tag = 'artist'

    @staticmethod
    def _create_item(api, node, rank, playcount, span):
        return WeeklyArtistChartItem(Artist(api, node.findtext('name')),
                                     rank, playcount, span)

class WeeklyAlbumChart(WeeklyChart):
    """A class for representing the weekly album charts"""
    item_tag = 'album'

    @staticmethod
    def _create_item(api, node, rank, playcount, span):
        album = Album(api, node.findtext('artist'), node.findtext('name'))
        return WeeklyAlbumChartItem(album, rank, playcount, span)

class WeeklyTrackChart(WeeklyChart):
    """A class for representing the weekly track charts"""
    item_tag = 'track'

    @staticmethod
    def _create_item(api, node, rank, playcount, span):
        track = Track(api, node.findtext('artist'), node.findtext('name'))
        return WeeklyTrackChartItem(track, rank, playcount, span)

from lastfm.album import Album
from lastfm.artist import Artist
from lastfm.error import InvalidParametersError, OperationFailedError
from lastfm.track import Track
from lastfm.util import timestamp_to_datetime, datetime_to_timestamp
