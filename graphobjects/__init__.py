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

graphobjects are real Python objects for the Facebook Graph API.

graphobjects decodes Graph API responses into read-only Python objects,
declared as `DataObject` classes with a field for each property. Resource
clients such as `PlacesOperations` turn method calls into authorized Graph
API requests and return those objects.

graphobjects have:

* declarative, checked conversion from Graph API JSON to Python objects

* full and correct HTTP support through the `httplib2` library

* distinct exceptions for each kind of failure, all `GraphError` instances


Example
=======

For example, you can find coffee near you in the shell::

    >>> from graphobjects import Facebook
    >>> facebook = Facebook('someAccessToken')
    >>> places = facebook.places.search('coffee', 33.050278, -96.745833, 5280)
    >>> [place.name for place in places]
    ['True Brew Coffee & Espresso Service', 'Starbucks Coffee']

and check in to one of them::

    >>> facebook.places.checkin(places[0].id, 33.026239, -96.707089,
    ...     'My favorite place')
    '10150431253050580'

"""

__version__ = '1.0'
__date__ = '19 October 2026'
__author__ = 'Six Apart Ltd.'

import graphobjects.dataobject
import graphobjects.fields as fields
from graphobjects.config import GraphConfig
from graphobjects.dataobject import DataObject
from graphobjects.errors import (ApiError, BadResponse, DeserializationError,
    Forbidden, GraphError, NotAuthorized, RequestError, ResourceNotFound,
    ServerError, TransportError)
from graphobjects.facebook import Facebook
from graphobjects.http import GraphApi
from graphobjects.listobject import ListObject, ListOf
from graphobjects.objects import (Checkin, Comment, Image, Location, Page,
    Photo, Reference, Tag)
from graphobjects.places import PlacesOperations

__all__ = ('Facebook', 'GraphApi', 'GraphConfig', 'PlacesOperations',
    'DataObject', 'ListObject', 'ListOf', 'fields',
    'Checkin', 'Comment', 'Image', 'Location', 'Page', 'Photo', 'Reference',
    'Tag',
    'GraphError', 'ApiError', 'NotAuthorized', 'Forbidden',
    'ResourceNotFound', 'RequestError', 'ServerError', 'BadResponse',
    'DeserializationError', 'TransportError')
