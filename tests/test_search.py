import unittest

from lastfm.album import Album
from lastfm.artist import Artist
from lastfm.search import Search, TagSearch, ArtistSearch, AlbumSearch, TrackSearch
from lastfm.tag import Tag
from lastfm.track import Track
from lastfm.error import InvalidParametersError
from .mocking.http import mock_api, lfm, MockResponse


def tag_results(total, names):
    tags = "".join("<tag><name>%s</name><count>10</count><url>www.last.fm/tag/%s</url></tag>"
                   % (n, n) for n in names)
    return lfm("""
<results for="disco" xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">
  <opensearch:Query role="request" searchTerms="disco" startPage="1"/>
  <opensearch:totalResults>%d</opensearch:totalResults>
  <opensearch:startIndex>0</opensearch:startIndex>
  <opensearch:itemsPerPage>2</opensearch:itemsPerPage>
  <tagmatches>%s</tagmatches>
</results>""" % (total, tags))

ARTIST_RESULTS = lfm("""
<results for="cher" xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">
  <opensearch:totalResults>2</opensearch:totalResults>
  <artistmatches>
    <artist><name>Cher</name><mbid>bfcc6d75-a6a5-4bc6-8282-47aec8531818</mbid></artist>
    <artist><name>Cher Lloyd</name><mbid></mbid></artist>
  </artistmatches>
</results>""")

ALBUM_RESULTS = lfm("""
<results for="believe" xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">
  <opensearch:totalResults>1</opensearch:totalResults>
  <albummatches>
    <album><name>Believe</name><artist>Cher</artist><id>2026126</id></album>
  </albummatches>
</results>""")

TRACK_RESULTS = lfm("""
<results for="believe" xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">
  <opensearch:totalResults>1</opensearch:totalResults>
  <trackmatches>
    <track><name>Believe</name><artist>Cher</artist><listeners>69572</listeners></track>
  </trackmatches>
</results>""")


class PagedHttp(object):
    """Answers tag.search with a different body for each page."""
    def __init__(self, http, pages):
        self.http = http
        self.pages = pages

    def get(self, url, params=None, headers=None, timeout=None):
        self.http.get(url, params, headers, timeout)
        return MockResponse(self.pages[int(params['page']) - 1])


class TestTagSearch(unittest.TestCase):
    def setUp(self):
        self.api, self.http = mock_api(session_key=None)
        self.search = TagSearch(self.api, {'tag': 'disco'}, 2)

    def test_page(self):
        self.http.respond('tag.search', tag_results(3, ['disco', 'italo disco']))
        tags = self.search.get_page(1)
        self.assertEqual(tags, [Tag(self.api, 'disco'), Tag(self.api, 'italo disco')])
        params = self.http.last_call.params
        self.assertEqual(params['tag'], 'disco')
        self.assertEqual(params['limit'], '2')
        self.assertEqual(params['page'], '1')

    def test_total_results_fetches_first_page(self):
        self.http.respond('tag.search', tag_results(3, ['disco', 'italo disco']))
        self.assertEqual(self.search.get_total_results(), 3)
        self.assertEqual(self.search.get_pages_count(), 2)
        self.assertEqual(len(self.http.calls), 1)

    def test_total_results_after_page(self):
        self.http.respond('tag.search', tag_results(3, ['disco', 'italo disco']))
        self.search.get_page(2)
        self.search.get_total_results()
        self.assertEqual(len(self.http.calls), 1)

    def test_iteration(self):
        self.api.set_http_session(PagedHttp(self.http, [
            tag_results(3, ['disco', 'italo disco']),
            tag_results(3, ['nu disco']),
        ]))
        names = [t.name for t in self.search]
        self.assertEqual(names, ['disco', 'italo disco', 'nu disco'])
        self.assertEqual([c.params['page'] for c in self.http.calls], ['1', '2'])

    def test_empty(self):
        self.http.respond('tag.search', tag_results(0, []))
        self.assertEqual(list(self.search), [])
        self.assertEqual(self.search.get_pages_count(), 0)

    def test_bad_page(self):
        self.assertRaises(InvalidParametersError, self.search.get_page, 0)


class TestOtherSearches(unittest.TestCase):
    def setUp(self):
        self.api, self.http = mock_api(session_key=None)

    def test_for_prefix(self):
        self.assertIs(Search.for_prefix('tag'), TagSearch)
        self.assertIs(Search.for_prefix('track'), TrackSearch)
        self.assertRaises(InvalidParametersError, Search.for_prefix, 'user')

    def test_artists(self):
        self.http.respond('artist.search', ARTIST_RESULTS)
        search = self.api.search_artist('cher')
        self.assertIsInstance(search, ArtistSearch)
        self.assertEqual(search.get_page(1),
                         [Artist(self.api, 'Cher'), Artist(self.api, 'Cher Lloyd')])
        self.assertEqual(self.http.last_call.params['limit'], '30')

    def test_albums(self):
        self.http.respond('album.search', ALBUM_RESULTS)
        search = self.api.search_album('believe')
        self.assertIsInstance(search, AlbumSearch)
        self.assertEqual(search.get_page(1), [Album(self.api, 'Cher', 'Believe')])

    def test_tracks(self):
        self.http.respond('track.search', TRACK_RESULTS)
        search = self.api.search_track('believe', artist='cher')
        self.assertIsInstance(search, TrackSearch)
        self.assertEqual(search.search_terms, {'track': 'believe', 'artist': 'cher'})
        self.assertEqual(search.get_page(1), [Track(self.api, 'Cher', 'Believe')])

    def test_track_without_artist(self):
        search = Track.search(self.api, 'believe')
        self.assertEqual(search.search_terms, {'track': 'believe'})


if __name__ == '__main__':
    unittest.main()
