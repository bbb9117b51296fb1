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

Fields are class attributes for `DataObject` subclasses that provide data
decoding functionality for your properties.

Each field knows the key of its value in a Graph API response (its
`api_name`), whether the value must be present (`required`), and how to
turn the JSON value into a Python value (`decode()`) and back (`encode()`).

Field values are read-only: once an object has been decoded, its fields
can't be set or deleted.

"""

from datetime import datetime, timezone

import graphobjects.dataobject
from graphobjects.errors import DeserializationError


def flatten_tags(value):
    """Flattens the wire representation of a tag list into a list of the
    raw tag dictionaries.

    The Graph API sends tag lists in several shapes: a plain list, a
    ``{"data": [...]}`` envelope, or a mapping keyed by arbitrary string
    indices (``{"0": {...}, "1": {...}}``). A mapping is flattened in the
    order its keys were received. Mapping values that are themselves lists
    (as in message tags keyed by text offset) are flattened into the
    result too.

    A `None` value flattens to `None`. Any other value raises
    `DeserializationError`.

    """
    if value is None:
        return None
    if isinstance(value, list):
        return list(value)
    if not isinstance(value, dict):
        raise DeserializationError('Cannot read a tag list from %r' % (value,))

    if 'data' in value:
        data = value['data']
        if not isinstance(data, list):
            raise DeserializationError('Tag list data %r is not a list' % (data,))
        return list(data)

    tags = []
    for tag in value.values():
        if isinstance(tag, list):
            tags.extend(tag)
        else:
            tags.append(tag)
    return tags


class Field(object):

    """A property for decoding dictionary values into object attributes and
    encoding attributes back into dictionary values.

    Use a `Field` instance directly for attributes that can be the same
    type as their dictionary values. Use one of the `Field` subclasses in
    this module to check or convert values as they're decoded.

    """

    def __init__(self, api_name=None, required=False):
        """Sets the field's matching dictionary key and whether it's required.

        Optional parameter `api_name` is the key of this field's value in a
        dictionary. If not given, the attribute name of the field when its
        class was defined is used.

        If optional parameter `required` is true, decoding a dictionary that
        has no value (or a null value) for this field raises
        `DeserializationError`. Otherwise a missing value decodes to `None`.

        """
        self.api_name = api_name
        self.required = required

    def install(self, attrname, cls):
        self.attrname = attrname
        if self.api_name is None:
            self.api_name = attrname
        self.of_cls = cls

    def __get__(self, obj, cls):
        if obj is None:
            # Yield the real field instance when gotten through the class.
            return self
        return obj.__dict__.get(self.attrname)

    def __set__(self, obj, value):
        raise AttributeError('%s.%s is read-only'
            % (type(obj).__name__, self.attrname))

    def __delete__(self, obj):
        raise AttributeError('%s.%s is read-only'
            % (type(obj).__name__, self.attrname))

    def decode_from(self, data):
        """Returns the decoded value of this field in dictionary `data`."""
        value = data.get(self.api_name)
        if value is None:
            if self.required:
                raise DeserializationError('%s is missing required field %r'
                    % (self.of_cls.__name__, self.api_name))
            return None
        return self.decode(value)

    def freeze(self, value):
        """Returns `value` as it should be kept on a read-only instance.

        This implementation returns the `value` parameter unchanged.

        """
        return value

    def decode(self, value):
        """Decodes a dictionary value into an attribute value.

        This implementation returns the `value` parameter unchanged.

        """
        return value

    def encode(self, value):
        """Encodes an attribute value into a dictionary value.

        This implementation returns the `value` parameter unchanged.

        """
        return value


class String(Field):

    """A field representing a text value."""

    def decode(self, value):
        if not isinstance(value, str):
            raise DeserializationError('Value %r for %s is not a string'
                % (value, self.api_name))
        return value


class Id(Field):

    """A field representing an object identifier.

    Identifiers are opaque strings. Numeric identifiers are converted to
    their decimal text, so they're never subject to number precision.

    """

    def decode(self, value):
        if isinstance(value, str):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        raise DeserializationError('Value %r for %s is not an identifier'
            % (value, self.api_name))


class Integer(Field):

    """A field representing a whole number."""

    def decode(self, value):
        if isinstance(value, bool):
            raise DeserializationError('Value %r for %s is not an integer'
                % (value, self.api_name))
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                return int(value)
            except ValueError:
                pass
        raise DeserializationError('Value %r for %s is not an integer'
            % (value, self.api_name))


class Float(Field):

    """A field representing a decimal number, such as a latitude.

    The Graph API sometimes sends these numbers as strings, so numeric
    strings are decoded too.

    """

    def decode(self, value):
        if isinstance(value, bool):
            raise DeserializationError('Value %r for %s is not a number'
                % (value, self.api_name))
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                pass
        raise DeserializationError('Value %r for %s is not a number'
            % (value, self.api_name))


class List(Field):

    """A field representing a homogeneous list of data.

    The elements of the list are decoded through another field specified
    when the `List` is declared. Decoded lists are tuples, so they can't be
    changed either.

    """

    def __init__(self, fld, **kwargs):
        """Sets the type of field representing the content of the list.

        Parameter `fld` is another field instance representing the list's
        content. For instance, if the field were to represent a list of
        timestamps, `fld` would be a `Datetime` instance.

        """
        super(List, self).__init__(**kwargs)
        self.fld = fld

    def install(self, attrname, cls):
        super(List, self).install(attrname, cls)

        # Make sure our content field knows its owner too.
        self.fld.install(attrname, cls)

    def decode(self, value):
        if not isinstance(value, list):
            raise DeserializationError('Value %r for %s is not a list'
                % (value, self.api_name))
        return tuple(self.fld.decode(v) for v in value)

    def freeze(self, value):
        if value is None:
            return None
        return tuple(value)

    def encode(self, value):
        return [self.fld.encode(v) for v in value]


class ReferenceList(List):

    """A field representing a list of objects connected to an object, such
    as the likes, comments or tags of a checkin.

    Connected lists arrive in any of the shapes `flatten_tags()` accepts.
    They're encoded back as ``{"data": [...]}`` envelopes.

    """

    def decode(self, value):
        return super(ReferenceList, self).decode(flatten_tags(value))

    def encode(self, value):
        return {'data': super(ReferenceList, self).encode(value)}


class AcceptsStringCls(object):
    """Mixin for fields with a ``cls`` attribute that can either be a
    ``DataObject`` subclass or a string name of a ``DataObject`` subclass (to
    allow forward references)."""

    def get_cls(self):
        cls = self.__dict__['cls']
        if not callable(cls):
            cls = graphobjects.dataobject.find_by_name(cls)
        return cls

    def set_cls(self, cls):
        self.__dict__['cls'] = cls

    cls = property(get_cls, set_cls)


class Object(AcceptsStringCls, Field):

    """A field representing a nested `DataObject`."""

    def __init__(self, cls, **kwargs):
        """Sets the the `DataObject` class the field represents.

        Parameter `cls` is the `DataObject` class representing the nested
        objects, or the name of that class.

        """
        super(Object, self).__init__(**kwargs)
        self.cls = cls

    def decode(self, value):
        if not isinstance(value, dict):
            raise DeserializationError('Value %r for %s is not an object'
                % (value, self.api_name))
        return self.cls.from_dict(value)

    def encode(self, value):
        return value.to_dict()


class TagList(ReferenceList):

    """A field representing the people tagged in a photo."""

    def __init__(self, **kwargs):
        super(TagList, self).__init__(Object('Tag'), **kwargs)


class Datetime(Field):

    """A field representing a timestamp.

    Graph API timestamps look like ``2011-03-13T01:00:49+0000``. Decoded
    values are `datetime` instances in UTC.

    """

    dateformat = "%Y-%m-%dT%H:%M:%S%z"
    utc = timezone.utc

    def __init__(self, dateformat=None, **kwargs):
        super(Datetime, self).__init__(**kwargs)
        if dateformat is not None:
            self.dateformat = dateformat

    def decode(self, value):
        if not isinstance(value, str):
            raise DeserializationError('Value %r for %s is not a timestamp'
                % (value, self.api_name))
        try:
            when = datetime.strptime(value, self.dateformat)
        except ValueError:
            raise DeserializationError('Value %r for %s is not a valid timestamp'
                % (value, self.api_name))
        if when.tzinfo is None:
            return when.replace(tzinfo=Datetime.utc)
        return when.astimezone(Datetime.utc)

    def encode(self, value):
        """Encodes a `datetime` instance into a timestamp string.

        A `datetime` with no time zone is taken to be in UTC.

        """
        if not isinstance(value, datetime):
            raise TypeError('Value to encode %r is not a datetime' % (value,))
        if value.tzinfo is None:
            value = value.replace(tzinfo=Datetime.utc)
        else:
            value = value.astimezone(Datetime.utc)
        return value.replace(microsecond=0).strftime(self.dateformat)
