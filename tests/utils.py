import logging
import os

import httplib2
import mock


DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')


def json_resource(name):
    with open(os.path.join(DATA_DIR, name + '.json'), 'rb') as f:
        return f.read()


def mock_http(req, resp_or_content):
    mock_obj = mock.NonCallableMock(spec_set=httplib2.Http)

    if not isinstance(req, dict):
        req = dict(uri=req)

    def make_response(response, url):
        default_response = {
            'status':           200,
            'content-type':     'text/javascript; charset=UTF-8',
            'content-location': url,
        }

        if isinstance(response, dict):
            if 'content' in response:
                content = response['content']
                del response['content']
            else:
                content = ''

            status = response.get('status', 200)
            if 200 <= status < 300:
                response_info = dict(default_response)
                response_info.update(response)
            else:
                # Homg all bets are off!! Use specified headers only.
                response_info = dict(response)
        else:
            response_info = dict(default_response)
            content = response

        return httplib2.Response(response_info), content

    resp, content = make_response(resp_or_content, req['uri'])
    mock_obj.request.return_value = (resp, content)
    return mock_obj


def unused_http():
    """Returns a user agent that fails the test if it's asked to request
    anything."""
    mock_obj = mock.NonCallableMock(spec_set=httplib2.Http)
    mock_obj.request.side_effect = AssertionError('unexpected HTTP request')
    return mock_obj


def log():
    import sys
    logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(asctime)s %(levelname)s %(message)s")
