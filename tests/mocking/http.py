from lastfm.api import Api

OK_BODY = '<?xml version="1.0" encoding="utf-8"?>\n<lfm status="ok">\n</lfm>'


class MockResponse(object):
    """The parts of a requests.Response the Api looks at."""
    def __init__(self, content, status_code=200):
        super(MockResponse, self).__init__()
        if isinstance(content, str):
            content = content.encode('utf-8')
        self.content = content
        self.status_code = status_code


class MockCall(object):
    def __init__(self, http_method, url, params, headers):
        super(MockCall, self).__init__()
        self.http_method = http_method
        self.url = url
        self.params = dict(params)
        self.headers = dict(headers or {})

    @property
    def method(self):
        """Name of the last.fm method that was called"""
        return self.params.get('method')

    def __repr__(self):
        return "<MockCall: %s %s>" % (self.http_method, self.method)


class MockHttpSession(object):
    """
    A simple not-full-featured mock version of the requests.Session class
    to use in testing. Bodies are registered per last.fm method name,
    every request is recorded in `calls`.

    An exception registered as a body is raised instead of answering.
    """
    def __init__(self):
        super(MockHttpSession, self).__init__()
        self.responses = dict()
        self.calls = []

    def respond(self, method, body, status_code=200):
        if isinstance(body, Exception):
            self.responses[method] = body
        else:
            self.responses[method] = MockResponse(body, status_code)

    def get(self, url, params=None, headers=None, timeout=None):
        return self._answer('GET', url, params or {}, headers)

    def post(self, url, data=None, headers=None, timeout=None):
        return self._answer('POST', url, data or {}, headers)

    def _answer(self, http_method, url, params, headers):
        call = MockCall(http_method, url, params, headers)
        self.calls.append(call)
        response = self.responses.get(call.method)
        if response is None:
            return MockResponse(OK_BODY)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def methods(self):
        return [c.method for c in self.calls]

    @property
    def last_call(self):
        return self.calls[-1]


def lfm(body):
    """Wrap body in a successful last.fm response document."""
    return ('<?xml version="1.0" encoding="utf-8"?>\n'
            '<lfm status="ok">\n%s\n</lfm>' % body)


def lfm_error(code, message):
    return ('<?xml version="1.0" encoding="utf-8"?>\n'
            '<lfm status="failed">\n<error code="%d">%s</error>\n</lfm>'
            % (code, message))


def mock_api(session_key='sessionkey', secret='secret', api_key='apikey'):
    """
    Returns an :class:`Api` talking to a fresh :class:`MockHttpSession`,
    without any wait between requests.
    """
    api = Api(api_key, secret=secret, session_key=session_key)
    http = MockHttpSession()
    api.set_http_session(http)
    api.set_fetch_interval(0)
    return api, http
