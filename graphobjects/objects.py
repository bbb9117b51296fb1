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

The Graph API objects `graphobjects` knows how to decode.

All of them are read-only values, decoded from a single response. Fields
absent from the response are `None`.

"""

from graphobjects import fields
from graphobjects.dataobject import DataObject


class Reference(DataObject):

    """A minimal mention of another object, such as the author of a post or
    a person who liked it."""

    id   = fields.Id(required=True)
    name = fields.String()


class Tag(DataObject):

    """A person tagged in a photo, at offsets `x` and `y` (percentages of
    the photo's width and height)."""

    id           = fields.Id()
    name         = fields.String()
    x            = fields.Float()
    y            = fields.Float()
    created_time = fields.Datetime()


class Image(DataObject):

    """One rendition of a `Photo`."""

    source = fields.String(required=True)
    width  = fields.Integer()
    height = fields.Integer()


class Photo(DataObject):

    id           = fields.Id(required=True)
    from_        = fields.Object(Reference, api_name='from')
    picture      = fields.String()
    source       = fields.String()
    link         = fields.String()
    icon         = fields.String()
    created_time = fields.Datetime()
    images       = fields.List(fields.Object(Image))
    name         = fields.String()
    position     = fields.Integer()
    updated_time = fields.Datetime()
    tags         = fields.TagList()


class Location(DataObject):

    """Where a `Page` is. Any part of a location may be missing."""

    street    = fields.String()
    city      = fields.String()
    state     = fields.String()
    country   = fields.String()
    zip       = fields.String()
    latitude  = fields.Float()
    longitude = fields.Float()


class Page(DataObject):

    """A Facebook page. Pages with a location are places, which people can
    check in to."""

    id       = fields.Id(required=True)
    name     = fields.String()
    category = fields.String()
    link     = fields.String()
    location = fields.Object(Location)


class Comment(DataObject):

    id           = fields.Id(required=True)
    from_        = fields.Object(Reference, api_name='from')
    message      = fields.String()
    created_time = fields.Datetime()


class Checkin(DataObject):

    """A visit to a place, as posted by the person who checked in."""

    id           = fields.Id(required=True)
    from_        = fields.Object(Reference, api_name='from')
    place        = fields.Object(Page)
    application  = fields.Object(Reference)
    created_time = fields.Datetime()
    message      = fields.String()
    tags         = fields.ReferenceList(fields.Object(Reference))
    likes        = fields.ReferenceList(fields.Object(Reference))
    comments     = fields.ReferenceList(fields.Object(Comment))
