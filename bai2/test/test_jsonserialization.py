# Copyright 2019 Open End AB
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import datetime
import pytest
import simplejson
from bai2 import jsonserialization, model, type_codes


class TestJSONEncoder(object):

    def encode(self, obj):
        return simplejson.loads(jsonserialization.dumps(obj))

    def test_dates(self):
        d = model.BaiDate(datetime.date(2004, 6, 21))
        assert self.encode(d) == {'__class__': 'BaiDate',
                                  'value': '2004-06-21'}
        d = model.BaiEndOfDay(datetime.date(2004, 6, 21))
        assert self.encode(d) == {'__class__': 'BaiEndOfDay',
                                  'value': '2004-06-21Teod'}

    def test_type_code(self):
        assert self.encode(type_codes.lookup(15)) == {
            'code': 15, 'transaction': 'NA', 'level': 'status',
            'description': 'Closing Ledger'}

    def test_funds(self):
        assert self.encode(model.UnknownAvail()) == {
            '__class__': 'UnknownAvail', 'qualifier': 'Z'}
        funds = model.DistributedAvailD([
            model.DistributedAvailDistribution(1, -50)])
        assert self.encode(funds) == {
            '__class__': 'DistributedAvailD', 'qualifier': 'D',
            'distributions': [{'__class__': 'DistributedAvailDistribution',
                               'days': 1, 'amount': -50}]}

    def test_file(self):
        file = model.File('A', 'B', model.BaiDateTime(
            datetime.datetime(2004, 6, 21, 2, 0)), 1, groups=[
                model.Group(None, 'ORIG', 'Update', model.BaiDate(
                    datetime.date(2004, 6, 20)), accounts=[
                        model.Account('123', 'USD', infos=[
                            model.Status(type_codes.lookup(10), -500)])])])
        result = self.encode(file)
        assert result['__class__'] == 'File'
        assert result['creation'] == {'__class__': 'BaiDateTime',
                                      'value': '2004-06-21 02:00:00'}
        group, = result['groups']
        assert group['originator'] == 'ORIG'
        assert group['ultimate_receiver'] is None
        assert group['currency'] is None
        account, = group['accounts']
        assert account['transaction_details'] == []
        info, = account['infos']
        assert info['__class__'] == 'Status'
        assert info['amount'] == -500
        assert info['code']['code'] == 10

    def test_keyword_arguments(self):
        text = jsonserialization.dumps(model.ImmediateAvail(), sort_keys=True)
        assert text == '{"__class__": "ImmediateAvail", "qualifier": "0"}'

    def test_unknown_object(self):
        with pytest.raises(TypeError):
            jsonserialization.dumps(object())
