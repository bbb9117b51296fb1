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

The `Facebook` client, the entry point to the Graph API.

"""

from graphobjects.config import GraphConfig
from graphobjects.http import GraphApi
from graphobjects.places import PlacesOperations


class Facebook(object):

    """A Graph API client acting as the user of an access token.

    Build one with the user's OAuth access token:

    >>> facebook = Facebook('someAccessToken')
    >>> for place in facebook.places.search('coffee', 33.050278, -96.745833, 5280):
    ...     print(place.name)

    A client built with no access token can't make any requests; all its
    operations raise `NotAuthorized`.

    Optional parameter `http` is the user agent object to make requests
    with, compatible with `httplib2.Http`. Optional parameter `config` is a
    complete `GraphConfig` to use instead of `access_token`.

    """

    def __init__(self, access_token=None, http=None, config=None):
        if config is None:
            config = GraphConfig(access_token)
        self.config = config
        self.graph = GraphApi(config, http=http)
        self.places = PlacesOperations(self.graph)

    def is_authorized(self):
        return self.graph.is_authorized()
