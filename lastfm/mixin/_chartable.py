#!/usr/bin/env python

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm.mixin"

def chartable(*chart_types):
    """
    Class decorator adding the weekly chart methods of last.fm to a class
    whose C{_default_params} identify it (tag, user).

    @param chart_types: any of 'album', 'artist' and 'track'
    """
    def wrapper(cls):
        prefix = cls.__name__.lower()

        def get_weekly_chart_time_spans(self):
            """
            Get the weeks for which weekly charts are available.
            @rtype: L{list} of L{WeeklyChartTimeSpan}
            """
            from lastfm.chart import WeeklyChartTimeSpan
            params = self._default_params(
                {'method': '%s.getWeeklyChartList' % prefix})
            data = self._api._fetch_data(params)
            return [
                    WeeklyChartTimeSpan.create_from_data(c)
                    for c in data.iter('chart')
                    ]

        cls.get_weekly_chart_time_spans = get_weekly_chart_time_spans

        for chart_type in chart_types:
            setattr(cls, 'get_weekly_%s_chart' % chart_type,
                    _chart_getter(prefix, chart_type))
        return cls
    return wrapper

def _chart_getter(prefix, chart_type):
    def get_weekly_chart(self, span = None):
        from lastfm.chart import WeeklyChart
        chart_cls = WeeklyChart.for_type(chart_type)
        params = self._default_params(
            {'method': '%s.getWeekly%sChart' % (prefix, chart_type.capitalize())})
        params = chart_cls._check_chart_params(params, span)
        data = self._api._fetch_data(params).find('weekly%schart' % chart_type)
        return chart_cls.create_from_data(self._api, self, data)

    get_weekly_chart.__name__ = 'get_weekly_%s_chart' % chart_type
    get_weekly_chart.__doc__ = """
            Get the weekly %(type)s chart for a given week. If no week is
            supplied, it will return the most recent %(type)s chart.

            @param span:     the week, one of L{get_weekly_chart_time_spans} (optional)
            @type span:      L{WeeklyChartTimeSpan}

            @rtype:          L{Weekly%(cap)sChart}
            """ % {'type': chart_type, 'cap': chart_type.capitalize()}
    return get_weekly_chart
