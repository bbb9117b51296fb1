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

Exceptions raised by `graphobjects`.

Every exception the library raises is a `GraphError`. Failed Graph API
requests raise `ApiError` subclasses, which are also `HTTPException`
instances, so callers that only care about HTTP trouble can catch those.

"""

import http.client


class GraphError(Exception):
    """Base class of all exceptions raised by `graphobjects`."""
    pass


class DeserializationError(GraphError, ValueError):
    """An exception thrown when response data does not have the shape a
    `DataObject` class expects.

    This happens when a required field is missing, or when a field's value
    is of the wrong JSON type (such as a string where an object is
    expected, or a timestamp in an unknown format).

    """
    pass


class TransportError(GraphError):
    """An exception thrown when the HTTP transport failed to complete a
    request at all, such as when the connection could not be made.

    The transport's own exception is available as the ``__cause__`` of the
    `TransportError`.

    """
    pass


class ApiError(GraphError, http.client.HTTPException):

    """An exception thrown when the Graph API answers with an error response.

    When the response carried a Graph API error document (an ``error``
    member with ``type``, ``message`` and ``code``), those values are
    available as the `error_type`, `error_message` and `error_code`
    attributes. Otherwise they are ``None``.

    """

    def __init__(self, message, status=None, error=None):
        super(ApiError, self).__init__(message)
        self.status = status
        if error is None:
            error = {}
        self.error_type = error.get('type')
        self.error_message = error.get('message')
        self.error_code = error.get('code')


class NotAuthorized(ApiError):
    """An exception thrown when a request needs an access token and none was
    given, or when the server reports the given access token is invalid or
    expired.

    This exception corresponds to the HTTP status code 401, and to Graph API
    errors of type ``OAuthException``.

    """
    pass


class Forbidden(ApiError):
    """An exception thrown when the server reports that the client, as
    authenticated, is not permitted to make the request.

    This exception corresponds to the HTTP status code 403, and to Graph API
    permission errors.

    """
    pass


class ResourceNotFound(ApiError):
    """An exception thrown when the server reports that the requested
    resource was not found."""
    pass


class RequestError(ApiError):
    """An exception thrown when the server reports an error in the client's
    request.

    This exception corresponds to the HTTP status code 400.

    """
    pass


class ServerError(ApiError):
    """An exception thrown when the server reports an unexpected error.

    This exception corresponds to the HTTP status codes 500 and above.

    """
    pass


class BadResponse(ApiError):
    """An exception thrown when the client receives some other non-success
    HTTP response, or a success response it can't read."""
    pass
