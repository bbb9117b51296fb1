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

from graphobjects import fields, listobject
from graphobjects.dataobject import DataObject
from graphobjects.errors import DeserializationError
from tests import utils


class MyObj(DataObject):
    myfield = fields.Field()


class TestListObjects(unittest.TestCase):

    cls = listobject.ListObject

    def test_sequence(self):

        class Toybox(self.cls):
            pass

        b = Toybox.from_dict({"data": [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10]})
        self.assertEqual(len(b), 11)
        self.assertEqual(b[7], 7)
        self.assertEqual(b[-1], 10)
        self.assertEqual(b[2:4], (2, 3))
        self.assertEqual(list(b), list(range(11)))
        self.assertEqual(list(reversed(b))[0], 10)
        self.assertTrue(3 in b)
        self.assertFalse(11 in b)

    def test_paging(self):

        b = self.cls.from_dict({
            "data": [],
            "paging": {"next": "https://graph.facebook.com/me/posts?limit=25&until=1297457980"},
        })
        self.assertEqual(len(b), 0)
        self.assertFalse(b)
        self.assertEqual(b.paging["next"],
            "https://graph.facebook.com/me/posts?limit=25&until=1297457980")

    def test_empty(self):
        b = self.cls.from_dict({})
        self.assertEqual(b.entries, ())
        self.assertEqual(len(b), 0)

        self.assertEqual(len(self.cls()), 0)

    def test_bare_list(self):
        b = self.cls.from_dict([1, 2, 3])
        self.assertEqual(list(b), [1, 2, 3])

    def test_not_a_list(self):
        self.assertRaises(DeserializationError,
            lambda: self.cls.from_dict({"data": {"0": 1}}))
        self.assertRaises(DeserializationError,
            lambda: self.cls.from_dict("data"))


class TestListOf(unittest.TestCase):

    def test_basemodule(self):
        # When creating ListOf(myclass), it should use ListObject as superclass
        self.assertEqual(listobject.ListOf._basemodule, listobject.ListObject)

    def test_same_class(self):
        self.assertTrue(listobject.ListOf(MyObj) is listobject.ListOf(MyObj))
        self.assertEqual(listobject.ListOf(MyObj).__name__, 'ListOfMyObj')
        self.assertTrue(listobject.ListOf('MyObj') is not listobject.ListOf(MyObj))

    def test_to_dict(self):
        MyObjList = listobject.ListOf(MyObj)
        obj = MyObjList(entries=[MyObj(myfield="myval")])
        self.assertIsInstance(obj, listobject.ListObject)
        self.assertEqual({"data": [{"myfield": "myval"}]}, obj.to_dict())

    def test_from_dict(self):
        MyObjList = listobject.ListOf(MyObj)
        actual = MyObjList.from_dict({"data": [{"myfield": "myval"}]})
        self.assertIsInstance(actual, listobject.ListObject)
        self.assertIsInstance(actual[0], MyObj)
        self.assertEqual("myval", actual.entries[0].myfield)
        expected = MyObjList(entries=[MyObj(myfield="myval")])
        self.assertEqual(actual, expected)

    def test_forward_reference(self):
        LaterList = listobject.ListOf('Later')

        class Later(DataObject):
            name = fields.String()

        actual = LaterList.from_dict({"data": [{"name": "soon"}]})
        self.assertIsInstance(actual[0], Later)
        self.assertEqual(actual[0].name, "soon")


if __name__ == '__main__':
    utils.log()
    unittest.main()
