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

Checkins and place search.

"""

import logging

import simplejson as json

from graphobjects.listobject import ListOf
from graphobjects.objects import Checkin, Page


log = logging.getLogger('graphobjects.places')


def format_degrees(value):
    """Returns the decimal text of a latitude or longitude."""
    return repr(float(value))


def encode_coordinates(latitude, longitude):
    """Returns the JSON text the Graph API expects as the ``coordinates`` of
    a checkin, with the values as decimal strings."""
    coordinates = {
        'latitude': format_degrees(latitude),
        'longitude': format_degrees(longitude),
    }
    return json.dumps(coordinates, separators=(',', ':'))


def check_whole_number(name, value):
    """Raises `ValueError` unless `value` is a non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError('%s must be a non-negative integer, not %r' % (name, value))


def format_tag(value):
    """Returns the text of a tagged person's ID, which may be given as a
    string or an integer."""
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise ValueError('%r is not a valid ID to tag' % (value,))


class PlacesOperations(object):

    """Operations on checkins and places, made through a `GraphApi`."""

    def __init__(self, graph):
        self.graph = graph

    def get_checkins(self, object_id='me', offset=0, limit=25):
        """Returns a `ListOf(Checkin)` of the checkins posted by the user
        `object_id` (by default, the authorized user).

        Optional parameters `offset` and `limit` select which checkins to
        return.

        """
        check_whole_number('offset', offset)
        check_whole_number('limit', limit)
        params = [
            ('offset', offset),
            ('limit', limit),
            ('with', 'location'),
        ]
        return self.graph.fetch_connections(object_id, 'posts', Checkin, params)

    def get_checkin(self, checkin_id):
        return self.graph.fetch_object(checkin_id, Checkin)

    def checkin(self, place_id, latitude, longitude, message=None, *tags):
        """Checks the authorized user in to a place, and returns the ID of the
        new checkin.

        Parameters `latitude` and `longitude` are where the user is, in
        decimal degrees. Optional parameter `message` is posted with the
        checkin, and any further parameters are the IDs of people to tag.

        """
        data = [
            ('place', place_id),
            ('coordinates', encode_coordinates(latitude, longitude)),
        ]
        if message is not None:
            data.append(('message', message))
        if tags:
            data.append(('tags', ','.join(format_tag(tag) for tag in tags)))

        log.debug('Checking in to place %s', place_id)
        return self.graph.publish('me', 'feed', data)

    def search(self, query, latitude, longitude, distance):
        """Returns a `ListOf(Page)` of the places matching `query` within
        `distance` meters of the given latitude and longitude."""
        check_whole_number('distance', distance)
        center = '%s,%s' % (format_degrees(latitude), format_degrees(longitude))
        params = [
            ('q', query),
            ('type', 'place'),
            ('center', center),
            ('distance', distance),
        ]
        return self.graph.fetch_object('search', ListOf(Page), params)
