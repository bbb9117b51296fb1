# Copyright (c) 2009-2010 Six Apart Ltd.
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# * Redistributions of source code must retain the above copyright notice,
#   this list of conditions and the following disclaimer.
#
# * Redistributions in binary form must reproduce the above copyright notice,
#   this list of conditions and the following disclaimer in the documentation
#   and/or other materials provided with the distribution.
#
# * Neither the name of Six Apart Ltd. nor the names of its contributors may
#   be used to endorse or promote products derived from this software without
#   specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""

`GraphApi` is the request layer shared by every resource client. It builds
Graph API URLs, attaches the ``Authorization: OAuth <token>`` header, makes
requests through an `httplib2.Http`-compatible user agent, turns error
responses into exceptions, and decodes JSON responses into objects.

"""

from http import HTTPStatus
import logging
from urllib.parse import quote, urlencode

import httplib2
import simplejson as json

from graphobjects import errors
from graphobjects.dataobject import DataObject
from graphobjects.fields import Id
from graphobjects.listobject import ListOf


userAgent = httplib2.Http()

log = logging.getLogger('graphobjects.http')


def decode_json(content):
    """Decodes a JSON response body.

    Bytes that aren't valid UTF-8 are replaced with the unicode Replacement
    Character rather than failing the whole response.

    """
    if isinstance(content, bytes):
        content = content.decode('utf-8', 'replace')
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise errors.DeserializationError('Response is not valid JSON: %s' % (exc,))


class Created(DataObject):

    """The response to a publishing request: the ID of the new object."""

    id = Id(required=True)


class GraphApi(object):

    """A client for the Graph API as a particular user.

    Parameter `config` is the `GraphConfig` naming the access token and
    base URL to use. Optional parameter `http` is the user agent object to
    use for requests; it should be compatible with `httplib2.Http`
    instances. If not given, a module-wide `httplib2.Http` is used.

    """

    response_has_content = {
        HTTPStatus.OK:         True,
        HTTPStatus.CREATED:    True,
        HTTPStatus.ACCEPTED:   False,
        HTTPStatus.NO_CONTENT: False,
    }

    content_types = ('application/json', 'text/javascript')

    # Graph API error codes for missing permissions rather than bad tokens.
    permission_error_codes = frozenset([10] + list(range(200, 300)))

    GraphError = errors.GraphError
    ApiError = errors.ApiError
    NotAuthorized = errors.NotAuthorized
    Forbidden = errors.Forbidden
    ResourceNotFound = errors.ResourceNotFound
    RequestError = errors.RequestError
    ServerError = errors.ServerError
    BadResponse = errors.BadResponse
    DeserializationError = errors.DeserializationError
    TransportError = errors.TransportError

    def __init__(self, config, http=None):
        self.config = config
        self.http = http

    def is_authorized(self):
        return bool(self.config.access_token)

    def require_authorization(self):
        """Raises `NotAuthorized` if this client has no access token."""
        if not self.is_authorized():
            raise self.NotAuthorized('An access token is required for this operation')

    def object_path(self, object_id, connection=None):
        """Returns the path of the object `object_id`, or of its `connection`
        list if given.

        The ID is escaped as a single path segment, so no ID can name a
        resource outside the configured base URL.

        """
        object_id = str(object_id)
        if object_id in ('', '.', '..'):
            raise ValueError('%r is not a valid object ID' % (object_id,))
        path = quote(object_id, safe='')
        if connection is not None:
            path = '%s/%s' % (path, quote(connection, safe=''))
        return path

    def build_url(self, path, params=None):
        """Returns the URL of the Graph API resource at `path`, relative to
        the configured base URL.

        Optional parameter `params` is a sequence of ``(name, value)`` pairs
        (or a dictionary) to add as the URL's query string, in order.

        """
        url = self.config.base_url + path
        if params:
            url = '%s?%s' % (url, urlencode(params))
        return url

    def get_request(self, url, method='GET', body=None, headers=None):
        """Returns the parameters for requesting `url` as a dictionary of
        keyword arguments suitable for passing to `httplib2.Http.request()`.

        Optional parameter `headers` are also included in the request as
        HTTP headers.

        """
        if headers is None:
            headers = {}
        if 'accept' not in headers:
            headers['accept'] = ', '.join(self.content_types)
        if self.config.access_token:
            headers['authorization'] = 'OAuth %s' % (self.config.access_token,)

        # Use 'uri' because httplib2.request does.
        request = dict(uri=url, headers=headers)
        if method != 'GET':
            request['method'] = method
        if body is not None:
            request['body'] = body
        return request

    def error_from_content(self, response, content):
        """Returns the Graph API error document in a response body as a
        dictionary, or `None` if the body has none."""
        content_type = response.get('content-type', '').split(';', 1)[0].strip()
        if content_type not in self.content_types or not content:
            return None
        try:
            data = decode_json(content)
        except errors.DeserializationError:
            return None
        if isinstance(data, dict) and isinstance(data.get('error'), dict):
            return data['error']
        return None

    def raise_for_error(self, url, status, reason, error):
        """Raises the exception corresponding to an error response.

        Parameter `error` is the Graph API error document from the response
        body, or `None`.

        """
        message = '%d %s requesting %s' % (status, reason, url)
        if error is not None:
            message = '%s: %s' % (message, error.get('message'))

        if status == HTTPStatus.UNAUTHORIZED:
            raise self.NotAuthorized(message, status=status, error=error)
        if error is not None and error.get('type') == 'OAuthException':
            if error.get('code') in self.permission_error_codes:
                raise self.Forbidden(message, status=status, error=error)
            raise self.NotAuthorized(message, status=status, error=error)
        if status == HTTPStatus.FORBIDDEN:
            raise self.Forbidden(message, status=status, error=error)
        if status == HTTPStatus.NOT_FOUND:
            raise self.ResourceNotFound(message, status=status, error=error)
        if status == HTTPStatus.BAD_REQUEST:
            raise self.RequestError(message, status=status, error=error)
        if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            raise self.ServerError(message, status=status, error=error)
        raise self.BadResponse(message, status=status, error=error)

    def raise_for_response(self, url, response, content):
        """Raises exceptions corresponding to HTTP responses that can't be
        decoded into results.

        Override this method to customize the error handling behavior for
        your target API.

        """
        if response.status not in self.response_has_content:
            error = self.error_from_content(response, content)
            self.raise_for_error(url, response.status, response.reason, error)

        if not self.response_has_content[response.status]:
            # then there's no content-type either, so we're done
            return

        # check that the response body was json
        content_type = response.get('content-type', '').split(';', 1)[0].strip()
        if content_type not in self.content_types:
            raise self.BadResponse(
                'Bad response fetching %s: content-type %s is not an expected type'
                % (url, response.get('content-type')), status=response.status)

    def request(self, url, method='GET', body=None, headers=None):
        """Makes an authorized request to `url` and returns its decoded JSON
        result, or `None` for a response with no content.

        Raises `NotAuthorized` without making any request if this client has
        no access token.

        """
        self.require_authorization()
        request = self.get_request(url, method=method, body=body, headers=headers)

        http = self.http
        if http is None:
            http = userAgent

        log.debug('%s %s', method, url)
        try:
            response, content = http.request(**request)
        except (httplib2.HttpLib2Error, OSError) as exc:
            raise self.TransportError('Could not %s %s: %s' % (method, url, exc)) from exc
        log.debug('Got %d %s for %s %s', response.status, response.reason, method, url)

        self.raise_for_response(url, response, content)
        if not self.response_has_content[response.status]:
            return None

        data = decode_json(content)
        # Some endpoints report errors in the body of a 200 response.
        if isinstance(data, dict) and isinstance(data.get('error'), dict):
            self.raise_for_error(url, response.status, response.reason, data['error'])
        return data

    def fetch_object(self, object_id, cls, params=None):
        """Fetches the object at path `object_id`, decoded as an instance of
        `DataObject` class `cls`."""
        data = self.request(self.build_url(self.object_path(object_id), params))
        return cls.from_dict(data)

    def fetch_connections(self, object_id, connection, cls, params=None):
        """Fetches the list of objects connected to `object_id` through
        `connection` (such as ``me/posts``), decoded as a `ListOf(cls)`."""
        url = self.build_url(self.object_path(object_id, connection), params)
        return ListOf(cls).from_dict(self.request(url))

    def publish(self, object_id, connection, data):
        """Creates a new object in the `connection` list of `object_id`
        through an HTTP ``POST`` request, and returns its ID.

        Parameter `data` is a sequence of ``(name, value)`` pairs (or a
        dictionary) to post as a form-encoded body, in order.

        """
        url = self.build_url(self.object_path(object_id, connection))
        headers = {'content-type': 'application/x-www-form-urlencoded'}
        result = self.request(url, method='POST', body=urlencode(data),
            headers=headers)
        return Created.from_dict(result).id

    def delete(self, object_id):
        """Deletes the object at path `object_id` through an HTTP ``DELETE``
        request."""
        self.request(self.build_url(self.object_path(object_id)), method='DELETE')
