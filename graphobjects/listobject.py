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

List responses from the Graph API look like ``{"data": [...], "paging":
{...}}``. `ListObject` decodes such a response, and acts as a sequence of
its decoded entries.

"""

from graphobjects import fields
from graphobjects.dataobject import DataObject, DataObjectMetaclass


class SequenceProxy(object):

    """An abstract class implementing the sequence protocol by proxying it to
    an instance attribute.

    `SequenceProxy` instances act like sequences by forwarding all sequence
    method calls to their `entries` attributes. The `entries` attribute should
    be a tuple or some other that implements the sequence protocol.

    """

    def make_sequence_method(methodname):
        """Makes a new function that proxies calls to `methodname` to the
        `entries` attribute of the instance on which the function is called as
        an instance method."""
        def seqmethod(self, *args, **kwargs):
            # Proxy these methods to self.entries.
            return getattr(self.entries or (), methodname)(*args, **kwargs)
        seqmethod.__name__ = methodname
        return seqmethod

    __len__      = make_sequence_method('__len__')
    __getitem__  = make_sequence_method('__getitem__')
    __iter__     = make_sequence_method('__iter__')
    __contains__ = make_sequence_method('__contains__')

    del make_sequence_method

    def __reversed__(self):
        return reversed(self.entries or ())


class ListOf(DataObjectMetaclass):

    """Metaclass defining a `ListObject` containing a set of some other
    class's instances.

    Unlike most metaclasses, this metaclass can be called directly to define
    new `ListObject` classes that contain objects of a specified other class,
    like so:

    >>> ListOfCheckin = ListOf(Checkin)

    This is equivalent to defining ``ListOfCheckin`` yourself:

    >>> class ListOfCheckin(ListObject):
    ...     entries = fields.List(fields.Object(Checkin), api_name='data')

    Calling `ListOf` again with the same class returns the same `ListObject`
    class.

    """

    _subclasses = {}
    _basemodule = None

    def __new__(cls, name, bases=None, attr=None):
        """Creates a new `ListObject` subclass.

        If `bases` and `attr` are specified, as in a regular subclass
        declaration, a new class is created as per the specified settings.

        If only `name` is specified, that value is used as a reference to a
        `DataObject` class to which the new `ListObject` class is bound.
        The `name` parameter can be either a name or a `DataObject` class,
        as when declaring a `graphobjects.fields.Object` field.

        """
        direct = attr is None
        if direct:
            # Don't bother making a new subclass if we already made one for
            # this target.
            if name in cls._subclasses:
                return cls._subclasses[name]

            entryclass = name
            if callable(entryclass):
                name = cls.__name__ + entryclass.__name__
            else:
                name = cls.__name__ + entryclass

            bases = (cls._basemodule,)

            attr = {
                '__module__': __name__,
                'entries': fields.List(fields.Object(entryclass), api_name='data'),
            }

        newcls = super(ListOf, cls).__new__(cls, name, bases, attr)

        # Save the result for later direct invocations.
        if direct:
            cls._subclasses[entryclass] = newcls
        elif cls._basemodule is None:
            cls._basemodule = newcls

        return newcls


class ListObject(SequenceProxy, DataObject, metaclass=ListOf):

    """A `DataObject` representing a list of other `DataObject` instances.

    The contents of a plain `ListObject` are not decoded at all. Use
    `ListOf` to make a `ListObject` class whose entries are decoded into
    instances of another class.

    """

    entries = fields.List(fields.Field(), api_name='data')
    paging  = fields.Field()

    @classmethod
    def from_dict(cls, data):
        """Decodes a Graph API list response into a new `ListObject`.

        A bare list is decoded as though it were the ``data`` member of a
        list response.

        """
        if isinstance(data, list):
            data = {'data': data}
        self = super(ListObject, cls).from_dict(data)
        if self.entries is None:
            self.__dict__['entries'] = ()
        return self
