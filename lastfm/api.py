#!/usr/bin/env python
"""The last.fm web service API access functionalities"""

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm"

from threading import Lock
import logging
import time

import requests

from lastfm.decorators import cached_property

logger = logging.getLogger('lastfm.api')
_lock = Lock()

class Api(object):
    """The class representing the last.fm web services API."""

    API_ROOT_URL = "https://ws.audioscrobbler.com/2.0/"
    """URL of the webservice API root"""

    AUTH_URL = "http://www.last.fm/api/auth/"
    """URL of the page where users authorize an API token"""

    FETCH_INTERVAL = 0.2
    """The minimum interval between successive HTTP request, in seconds"""

    DEFAULT_TIMEOUT = 30
    """Seconds to wait for the webservice to answer"""

    SEARCH_XMLNS = "http://a9.com/-/spec/opensearch/1.1/"

    DEBUG_LEVELS = {
        'LOW': 1,
        'MEDIUM': 2,
        'HIGH': 3
    }

    UNSIGNED_PARAMS = ('api_sig', 'format', 'callback')

    def __init__(self,
                 api_key,
                 secret = None,
                 session_key = None,
                 request_headers = None,
                 timeout = None,
                 debug = None):
        """
        Create an Api object to access the last.fm webservice API. Use this object as a
        starting point for accessing all the webservice methods.

        @param api_key:            last.fm API key
        @type api_key:             L{str}
        @param secret:             last.fm API secret (optional, required only for
                                   authenticated webservice methods)
        @type secret:              L{str}
        @param session_key:        session key for the authenticated session (optional,
                                   required only for authenticated webservice methods)
        @type session_key:         L{str}
        @param request_headers:    HTTP headers for the requests to last.fm webservices
                                   (optional)
        @type request_headers:     L{dict}
        @param timeout:            seconds to wait for an answer (optional)
        @type timeout:             L{float}
        @param debug:              debug level, one of the keys of L{DEBUG_LEVELS} (optional)
        @type debug:               L{str}

        @raise InvalidParametersError: If debug is not a known debug level.
        """
        if not api_key:
            raise InvalidParametersError("api_key has to be provided")
        self._api_key = api_key
        self._secret = secret
        self._session_key = session_key
        self._auth_token = None
        self._timeout = timeout or Api.DEFAULT_TIMEOUT
        self._fetch_interval = Api.FETCH_INTERVAL
        self._last_fetch_time = 0.0
        self._http = requests.Session()
        self._initialize_request_headers(request_headers)
        self._initialize_user_agent()

        if debug is not None:
            if debug in Api.DEBUG_LEVELS:
                self._debug = Api.DEBUG_LEVELS[debug]
            else:
                raise InvalidParametersError("debug parameter must be one of the keys in Api.DEBUG_LEVELS dict")
        else:
            self._debug = 0

    @classmethod
    def from_settings(cls, settings):
        """
        Create an Api object from the C{lastfm} section of a loaded
        configuration.

        @param settings:  the configuration, see L{lastfm.config}
        @type settings:   L{dict}
        @rtype:           L{Api}
        """
        section = settings.get('lastfm') or {}
        api = cls(
                  section.get('api_key'),
                  secret = section.get('secret'),
                  session_key = section.get('session_key'),
                  timeout = section.get('timeout'),
                  debug = section.get('debug'),
                  )
        if section.get('user_agent'):
            api.set_user_agent(section['user_agent'])
        if section.get('fetch_interval') is not None:
            api.set_fetch_interval(float(section['fetch_interval']))
        return api

    @property
    def api_key(self):
        """
        The last.fm API key
        @rtype: L{str}
        """
        return self._api_key

    @property
    def secret(self):
        """
        The last.fm API secret
        @rtype: L{str}
        """
        return self._secret

    def set_secret(self, secret):
        """
        Set the last.fm API secret.

        @param secret:    the secret
        @type secret:     L{str}
        """
        self._secret = secret

    @property
    def session_key(self):
        """
        Session key for the authenticated session
        @rtype: L{str}
        """
        return self._session_key

    @property
    def authenticated(self):
        """
        whether this api has a session key to make authenticated calls with
        @rtype: L{bool}
        """
        return self._session_key is not None

    def set_session_key(self, session_key = None):
        """
        Set the session key for the authenticated session.

        @param session_key: the session key for authentication (optional). If not provided then
                            a new one is fetched from last.fm for the authorized L{auth_token}
        @type session_key: L{str}

        @raise lastfm.AuthenticationFailedError: Either session_key should be provided or
                                                 API secret must be present.
        """
        if session_key is not None:
            self._session_key = session_key
        else:
            params = {'method': 'auth.getSession', 'token': self.auth_token}
            self._session_key = self._fetch_data(params, sign = True).findtext('session/key')
            self._auth_token = None
            logger.info("Started an authenticated session")

    @cached_property
    def auth_token(self):
        """
        The authentication token for the authenticated session.
        @rtype: L{str}
        """
        params = {'method': 'auth.getToken'}
        return self._fetch_data(params, sign = True).findtext('token')

    @property
    def auth_url(self):
        """
        The authentication URL for the authenticated session.
        @rtype: L{str}
        """
        return "%s?api_key=%s&token=%s" % (Api.AUTH_URL, self.api_key, self.auth_token)

    def set_user_agent(self, user_agent):
        """
        Override the default user agent.

        @param user_agent: a string that should be send to the server as the User-agent
        @type user_agent: L{str}
        """
        self._request_headers['User-Agent'] = user_agent

    def set_http_session(self, http):
        """
        Override the HTTP session used to talk to last.fm.

        @param http: an object with the C{get} and C{post} methods of L{requests.Session}
        @type http:  L{requests.Session}
        """
        self._http = http

    def set_fetch_interval(self, fetch_interval):
        """
        Override the minimum interval between successive requests.

        @param fetch_interval: time, in seconds
        @type fetch_interval:  L{float}
        """
        self._fetch_interval = fetch_interval

    def get_tag(self, name):
        """
        Get a tag object.

        @param name:    the tag name
        @type name:     L{str}
        @rtype:         L{Tag}
        """
        return Tag(self, name)

    def get_global_top_tags(self):
        """
        Get the top global tags on Last.fm, sorted by popularity (number of times used).
        @rtype:         L{list} of L{Tag}
        """
        return Tag.get_top_tags(self)

    def search_tag(self, tag, items_per_page = 30):
        """
        Search for a tag by name.

        @rtype:         L{TagSearch}
        """
        return Tag.search(self, tag, items_per_page)

    def get_artist(self, name):
        return Artist(self, name)

    def search_artist(self, artist, items_per_page = 30):
        return Artist.search(self, artist, items_per_page)

    def get_album(self, artist, title):
        return Album(self, artist, title)

    def search_album(self, album, items_per_page = 30):
        return Album.search(self, album, items_per_page)

    def get_track(self, artist, title):
        return Track(self, artist, title)

    def search_track(self, track, artist = None, items_per_page = 30):
        return Track.search(self, track, items_per_page, artist = artist)

    def get_user(self, name):
        return User(self, name)

    def get_authenticated_user(self):
        """
        Get the user the session key belongs to.

        @rtype:         L{AuthenticatedUser}
        @raise AuthenticationRequiredError: If no session key is set.
        """
        return AuthenticatedUser.get_user(self)

    def get_country(self, name):
        return Country(self, name)

    def _initialize_request_headers(self, request_headers):
        if request_headers:
            self._request_headers = dict(request_headers)
        else:
            self._request_headers = {}

    def _initialize_user_agent(self):
        user_agent = 'python-lastfm/%s (python-requests/%s)' % \
                     (__version__, requests.__version__)
        self.set_user_agent(user_agent)

    def _encode_parameters(self, parameters):
        return dict([(k, str(v)) for (k, v) in parameters.items() if v is not None])

    def _wait_for_interval(self):
        delta = time.time() - self._last_fetch_time
        if delta < self._fetch_interval:
            time.sleep(self._fetch_interval - delta)

    def _read_url_data(self, http_method, params):
        with _lock:
            self._wait_for_interval()
            if self._debug >= Api.DEBUG_LEVELS['LOW']:
                logger.debug("%s %s method=%s", http_method, Api.API_ROOT_URL, params.get('method'))
            try:
                if http_method == 'POST':
                    response = self._http.post(Api.API_ROOT_URL,
                                               data = params,
                                               headers = self._request_headers,
                                               timeout = self._timeout)
                else:
                    response = self._http.get(Api.API_ROOT_URL,
                                              params = params,
                                              headers = self._request_headers,
                                              timeout = self._timeout)
            except requests.RequestException as e:
                logger.error("Could not reach last.fm for %s: %s", params.get('method'), e)
                raise NetworkError("Request to last.fm failed: %s" % e) from e
            finally:
                self._last_fetch_time = time.time()
        if self._debug >= Api.DEBUG_LEVELS['MEDIUM']:
            logger.debug("HTTP %s for %s", response.status_code, params.get('method'))
        if self._debug >= Api.DEBUG_LEVELS['HIGH']:
            logger.debug("RAW DATA\n %s", response.content)
        # failures come as an <lfm status="failed"> body, whatever the status
        return response.content

    def _fetch_data(self,
                   params,
                   sign = False,
                   session = False):
        params = self._encode_parameters(params)
        params['api_key'] = self.api_key

        if session:
            if self.session_key is not None:
                params['sk'] = self.session_key
            else:
                raise AuthenticationRequiredError("session key must be present to call this method")

        if sign:
            params['api_sig'] = self._get_api_sig(params)

        xml = self._read_url_data('GET', params)
        return self._check_xml(xml)

    def _post_data(self, params):
        params = self._encode_parameters(params)
        params['api_key'] = self.api_key

        if self.session_key is not None:
            params['sk'] = self.session_key
        else:
            raise AuthenticationRequiredError("session key must be present to call this method")

        params['api_sig'] = self._get_api_sig(params)
        xml = self._read_url_data('POST', params)
        return self._check_xml(xml)

    def _get_api_sig(self, params):
        if self.secret is not None:
            sig = ''
            for name in sorted(params.keys()):
                if name in Api.UNSIGNED_PARAMS: continue
                sig += ("%s%s" % (name, params[name]))
            sig += self.secret
            return md5(sig.encode('utf-8')).hexdigest()
        else:
            raise AuthenticationFailedError("api secret must be present to call this method")

    def _check_xml(self, xml):
        data = None
        try:
            data = ElementTree.fromstring(xml)
        except ElementTree.ParseError as e:
            logger.error("Error in parsing XML: %s", e)
            raise OperationFailedError("Error in parsing XML: %s" % e)
        if data.get('status') != "ok":
            error = data.find("error")
            if error is None:
                raise OperationFailedError("last.fm answered with status '%s'" % data.get('status'))
            code = (error.get('code') or '').strip()
            code = int(code) if code.isdigit() else None
            message = (error.text or '').strip()
            logger.error("last.fm error %s: %s", code, message)
            if code in error_map:
                raise error_map[code](message, code)
            else:
                raise LastfmError(message, code)
        return data

    def __repr__(self):
        return "<lastfm.Api: %s>" % self._api_key

from hashlib import md5
import xml.etree.ElementTree as ElementTree

from lastfm.album import Album
from lastfm.artist import Artist
from lastfm.error import error_map, LastfmError, OperationFailedError, AuthenticationFailedError,\
    AuthenticationRequiredError, InvalidParametersError, NetworkError
from lastfm.geo import Country
from lastfm.tag import Tag
from lastfm.track import Track
from lastfm.user import User, AuthenticatedUser
