import unittest
from datetime import datetime

from lastfm.artist import Artist
from lastfm.error import AuthenticationRequiredError, InvalidParametersError
from lastfm.event import Event
from lastfm.geo import Country
from lastfm.tag import Tag
from lastfm.track import Track
from lastfm.user import User, AuthenticatedUser, Gender
from .mocking.http import mock_api, lfm

USER_INFO = lfm("""
<user>
  <id>1000002</id>
  <name>RJ</name>
  <realname>Richard Jones</realname>
  <url>http://www.last.fm/user/RJ</url>
  <image>http://userserve-ak.last.fm/serve/126/8270359.jpg</image>
  <lang>en</lang>
  <country>UK</country>
  <age>27</age>
  <gender>m</gender>
  <subscriber>1</subscriber>
  <playcount>54189</playcount>
  <playlists>4</playlists>
</user>""")

SPARSE_USER_INFO = lfm("""
<user>
  <name>quiet</name>
  <lang>de</lang>
  <country></country>
  <age></age>
  <gender>n</gender>
  <subscriber>0</subscriber>
  <playcount>0</playcount>
</user>""")

RECOMMENDED_EVENTS = lfm("""
<events xmlns:geo="http://www.w3.org/2003/01/geo/wgs84_pos#" user="RJ" page="1" perPage="20" totalPages="1" total="2">
  <event>
    <id>640218</id>
    <title>Ane Brun</title>
    <artists><artist>Ane Brun</artist><headliner>Ane Brun</headliner></artists>
    <venue><name>Islington Assembly Hall</name></venue>
    <startDate>Thu, 12 Mar 2009 20:00:00</startDate>
    <url>http://www.last.fm/event/640218</url>
  </event>
  <event>
    <id>700012</id>
    <title>Low</title>
    <startDate></startDate>
    <url>http://www.last.fm/event/700012</url>
  </event>
</events>""")

TOP_ARTISTS = lfm("""
<topartists user="RJ" type="overall">
  <artist rank="1"><name>Dream Theater</name><playcount>1337</playcount></artist>
  <artist rank="2"><name>Opeth</name><playcount>931</playcount></artist>
</topartists>""")

TOP_TAGS = lfm("""
<toptags user="RJ">
  <tag><name>rock</name><count>19</count><url>www.last.fm/tag/rock</url></tag>
</toptags>""")

FRIENDS = lfm("""
<friends for="RJ" page="1" perPage="50" totalPages="1">
  <user><name>eartle</name><realname>Michael Coffey</realname></user>
  <user><name>Russ</name></user>
</friends>""")

LOVED_TRACKS = lfm("""
<lovedtracks user="RJ">
  <track>
    <name>Nasty</name>
    <date uts="1236707654">10 Mar 2009, 17:54</date>
    <artist><name>Janet Jackson</name></artist>
  </track>
</lovedtracks>""")

ODD_DATE_EVENTS = lfm("""
<events user="RJ" page="1" perPage="20" totalPages="1" total="1">
  <event>
    <id>640219</id>
    <title>Ane Brun</title>
    <startDate>2009-03-12</startDate>
  </event>
</events>""")

RECENT_TRACKS = lfm("""
<recenttracks user="RJ">
  <track nowplaying="true">
    <artist mbid="2f9ecbed-27be-40e6-abca-6de49d50299e">Aretha Franklin</artist>
    <name>Sisters Are Doing It For Themselves</name>
    <album mbid=""></album>
  </track>
</recenttracks>""")


class TestUser(unittest.TestCase):
    def setUp(self):
        self.api, self.http = mock_api(session_key=None)
        self.user = User(self.api, 'RJ')

    def test_basics(self):
        self.assertEqual(str(self.user), 'RJ')
        self.assertEqual(self.user, User(self.api, 'rj'))
        self.assertEqual(self.user.url, 'http://www.last.fm/user/RJ')

    def test_top_artists(self):
        self.http.respond('user.getTopArtists', TOP_ARTISTS)
        artists = self.user.get_top_artists(period='7day')
        self.assertEqual(artists[0].item, Artist(self.api, 'Dream Theater'))
        self.assertEqual(artists[0].weight, 1337)
        self.assertEqual(self.http.last_call.params['period'], '7day')
        self.assertEqual(self.user.top_artist.item.name, 'Dream Theater')

    def test_bad_period(self):
        self.assertRaises(InvalidParametersError, self.user.get_top_artists, period='week')
        self.assertEqual(self.http.calls, [])

    def test_top_tags(self):
        self.http.respond('user.getTopTags', TOP_TAGS)
        tags = self.user.get_top_tags(limit=1)
        self.assertEqual(tags[0].item, Tag(self.api, 'rock'))
        self.assertEqual(tags[0].weight, 19)
        self.assertEqual(self.http.last_call.params['limit'], '1')

    def test_friends(self):
        self.http.respond('user.getFriends', FRIENDS)
        self.assertEqual(self.user.get_friends(),
                         [User(self.api, 'eartle'), User(self.api, 'Russ')])

    def test_loved_tracks(self):
        self.http.respond('user.getLovedTracks', LOVED_TRACKS)
        self.assertEqual(self.user.get_loved_tracks(),
                         [Track(self.api, 'Janet Jackson', 'Nasty')])

    def test_recent_tracks(self):
        self.http.respond('user.getRecentTracks', RECENT_TRACKS)
        tracks = self.user.get_recent_tracks(limit=1)
        self.assertEqual(tracks[0].artist_name, 'Aretha Franklin')
        self.assertEqual(tracks[0].title, 'Sisters Are Doing It For Themselves')


class TestAuthenticatedUser(unittest.TestCase):
    def setUp(self):
        self.api, self.http = mock_api()
        self.http.respond('user.getInfo', USER_INFO)

    def test_requires_session(self):
        api, http = mock_api(session_key=None)
        self.assertRaises(AuthenticationRequiredError, AuthenticatedUser.get_user, api)
        self.assertRaises(AuthenticationRequiredError, api.get_authenticated_user)
        self.assertEqual(http.calls, [])

    def test_get_user(self):
        user = AuthenticatedUser.get_user(self.api)
        self.assertEqual(user.name, 'RJ')
        params = self.http.last_call.params
        self.assertEqual(params['sk'], 'sessionkey')
        self.assertIn('api_sig', params)

    def test_info(self):
        user = self.api.get_authenticated_user()
        self.assertEqual(user.get_image_url(), 'http://userserve-ak.last.fm/serve/126/8270359.jpg')
        self.assertEqual(user.get_language_code(), 'en')
        self.assertEqual(user.get_country(), Country(self.api, 'UK'))
        self.assertEqual(user.get_age(), 27)
        self.assertIs(user.get_gender(), Gender.MALE)
        self.assertTrue(user.is_subscriber())
        self.assertEqual(user.get_playcount(), 54189)

    def test_info_fetched_every_time(self):
        user = AuthenticatedUser.get_user(self.api)
        user.get_age()
        user.get_age()
        self.assertEqual(self.http.methods, ['user.getInfo'] * 3)

    def test_sparse_info(self):
        self.http.respond('user.getInfo', SPARSE_USER_INFO)
        user = AuthenticatedUser.get_user(self.api)
        self.assertIsNone(user.get_country())
        self.assertIsNone(user.get_age())
        self.assertIsNone(user.get_image_url())
        self.assertIs(user.get_gender(), Gender.UNSPECIFIED)
        self.assertFalse(user.is_subscriber())
        self.assertEqual(user.get_playcount(), 0)

    def test_recommended_events(self):
        self.http.respond('user.getRecommendedEvents', RECOMMENDED_EVENTS)
        user = AuthenticatedUser.get_user(self.api)
        events = user.get_recommended_events(limit=5, page=2)
        self.assertEqual(events, [Event(self.api, 640218), Event(self.api, 700012)])
        self.assertEqual(events[0].title, 'Ane Brun')
        self.assertEqual(events[0].start_date, datetime(2009, 3, 12, 20, 0, 0))
        self.assertIsNone(events[1].start_date)
        self.assertEqual(events[0].get_url(), 'http://www.last.fm/event/640218')
        params = self.http.last_call.params
        self.assertEqual(params['limit'], '5')
        self.assertEqual(params['page'], '2')
        self.assertEqual(params['sk'], 'sessionkey')

    def test_event_with_unknown_date_format(self):
        self.http.respond('user.getRecommendedEvents', ODD_DATE_EVENTS)
        user = AuthenticatedUser.get_user(self.api)
        with self.assertLogs('lastfm.event', level='WARNING') as cm:
            events = user.get_recommended_events()
        self.assertEqual(events[0].title, 'Ane Brun')
        self.assertIsNone(events[0].start_date)
        self.assertIn('2009-03-12', cm.output[0])

    def test_recommended_events_after_logout(self):
        user = AuthenticatedUser.get_user(self.api)
        self.api._session_key = None
        self.assertRaises(AuthenticationRequiredError, user.get_recommended_events)
        self.assertEqual(self.http.methods, ['user.getInfo'])


class TestGender(unittest.TestCase):
    def test_codes(self):
        self.assertIs(Gender.from_code('m'), Gender.MALE)
        self.assertIs(Gender.from_code('f'), Gender.FEMALE)
        self.assertIs(Gender.from_code(''), Gender.UNSPECIFIED)
        self.assertIs(Gender.from_code(None), Gender.UNSPECIFIED)


if __name__ == '__main__':
    unittest.main()
