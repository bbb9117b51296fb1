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

`DataObject` is the mechanism for converting Graph API dictionaries into
objects. These conversions are performed with aid of `Field` instances
declared on `DataObject` subclasses. `Field` classes reside in the
`graphobjects.fields` module.

Decoding happens all at once in `DataObject.from_dict()`, so a dictionary
that doesn't fit its class fails there, and a decoded instance is never
changed afterward.

"""

from copy import deepcopy

import graphobjects.fields
from graphobjects.errors import DeserializationError


classes_by_name = {}


def find_by_name(name):
    """Finds and returns the DataObject subclass with the given name.

    Parameter `name` should be a bare class name with no module. If there is
    no class by that name, raises `KeyError`.

    """
    return classes_by_name[name]


class DataObjectMetaclass(type):
    """Metaclass for `DataObject` classes.

    This metaclass installs all `graphobjects.fields.Field` instances
    declared as attributes of the new class, and makes the new class
    findable through the `dataobject.find_by_name()` function.

    """

    def __new__(cls, name, bases, attrs):
        """Creates and returns a new `DataObject` class with its declared
        fields and name."""
        fields = {}
        new_fields = {}

        # Inherit all the parent DataObject classes' fields.
        for base in bases:
            if isinstance(base, DataObjectMetaclass):
                fields.update(base.fields)

        # Move all the class's attributes that are Fields to the fields set.
        for attrname, field in attrs.items():
            if isinstance(field, graphobjects.fields.Field):
                new_fields[attrname] = field
            elif attrname in fields:
                # Throw out any parent fields that the subclass defined as
                # something other than a Field.
                del fields[attrname]

        fields.update(new_fields)
        attrs['fields'] = fields
        obj_cls = super(DataObjectMetaclass, cls).__new__(cls, name, bases, attrs)

        for attrname, field in new_fields.items():
            field.install(attrname, obj_cls)

        # Register the new class so Object fields can have forward-referenced it.
        classes_by_name[name] = obj_cls

        return obj_cls


class DataObject(object, metaclass=DataObjectMetaclass):

    """An object that can be decoded from or encoded as a dictionary.

    DataObject subclasses should be declared with their different data
    attributes defined as instances of fields from the `graphobjects.fields`
    module. For example:

    >>> from graphobjects import dataobject, fields
    >>> class Comment(dataobject.DataObject):
    ...     id           = fields.Id(required=True)
    ...     message      = fields.String()
    ...     created_time = fields.Datetime()
    ...

    A DataObject's fields then provide the coding between dictionaries and
    live DataObject instances.

    Instances are read-only, and list fields hold tuples. The dictionary an
    instance was decoded from is kept as `api_data`, a private copy that
    `to_dict()` copies again before returning.

    """

    def __init__(self, **kwargs):
        """Initializes a new `DataObject` with the given field values."""
        for key in kwargs:
            if key not in self.fields:
                raise TypeError('%s has no field %r'
                    % (type(self).__name__, key))
        self.__dict__['api_data'] = {}
        for key, value in kwargs.items():
            self.__dict__[key] = self.fields[key].freeze(value)

    def __setattr__(self, name, value):
        raise AttributeError('%s instances are read-only' % (type(self).__name__,))

    def __delattr__(self, name):
        raise AttributeError('%s instances are read-only' % (type(self).__name__,))

    def __eq__(self, other):
        """Returns whether two `DataObject` instances are equivalent.

        If the `DataObject` instances are of the same type and contain the
        same data in all their fields, the objects are equivalent.

        """
        if type(self) != type(other):
            return False
        for k in self.fields:
            if getattr(self, k) != getattr(other, k):
                return False
        return True

    __hash__ = None

    def __repr__(self):
        ident = getattr(self, 'id', None)
        if ident is None:
            return '<%s>' % (type(self).__name__,)
        return '<%s %s>' % (type(self).__name__, ident)

    def to_dict(self):
        """Encodes the DataObject to a dictionary.

        Keys of the original dictionary that no field declared are kept.
        Fields with `None` values are omitted.

        """
        data = deepcopy(self.api_data)
        for field_name, field in self.fields.items():
            value = getattr(self, field_name)
            if value is not None:
                data[field.api_name] = field.encode(value)
        return data

    @classmethod
    def from_dict(cls, data):
        """Decodes a dictionary into a new `DataObject` instance.

        Raises `DeserializationError` if `data` is not a dictionary, is
        missing a required field, or has a field value that can't be
        decoded.

        """
        if not isinstance(data, dict):
            raise DeserializationError('Cannot decode %s from non-dictionary data %r'
                % (cls.__name__, data))

        values = dict((name, field.decode_from(data))
            for name, field in cls.fields.items())

        self = cls.__new__(cls)
        self.__dict__['api_data'] = deepcopy(data)
        self.__dict__.update(values)
        return self
