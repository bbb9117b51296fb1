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

import unittest

from graphobjects import Facebook, GraphApi, GraphConfig, PlacesOperations
from tests import utils


class TestFacebook(unittest.TestCase):

    def test_authorized(self):
        facebook = Facebook('someAccessToken', http=utils.unused_http())
        self.assertTrue(facebook.is_authorized())
        self.assertTrue(isinstance(facebook.graph, GraphApi))
        self.assertTrue(isinstance(facebook.places, PlacesOperations))
        self.assertTrue(facebook.places.graph is facebook.graph)
        self.assertEqual(facebook.config.access_token, 'someAccessToken')
        self.assertEqual(facebook.config.base_url, 'https://graph.facebook.com/')

    def test_unauthorized(self):
        self.assertFalse(Facebook().is_authorized())
        self.assertFalse(Facebook(None).is_authorized())
        self.assertFalse(Facebook('').is_authorized())

    def test_config(self):
        config = GraphConfig('someAccessToken', base_url='http://localhost:8080/graph')
        request = {
            'uri': 'http://localhost:8080/graph/search?q=coffee&type=place&center=33.0%2C-96.0&distance=100',
            'headers': {
                'accept': 'application/json, text/javascript',
                'authorization': 'OAuth someAccessToken',
            },
        }
        h = utils.mock_http(request, """{"data": []}""")
        facebook = Facebook(config=config, http=h)
        self.assertTrue(facebook.config is config)
        self.assertEqual(len(facebook.places.search('coffee', 33, -96, 100)), 0)
        h.request.assert_called_once_with(**request)


if __name__ == '__main__':
    utils.log()
    unittest.main()
