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

import pytest
from bai2 import type_codes
from bai2.type_codes import UnknownCode


class TestTables(object):

    def test_group_status(self):
        assert type_codes.group_status(1) == 'Update'
        assert type_codes.group_status(4) == 'Test Only'
        with pytest.raises(UnknownCode):
            type_codes.group_status(5)

    def test_as_of_date_modifier(self):
        assert type_codes.as_of_date_modifier(2) == 'Final previous-day data'
        with pytest.raises(UnknownCode):
            type_codes.as_of_date_modifier(0)

    def test_funds_type(self):
        for qualifier in 'Z012SVD':
            type_codes.funds_type(qualifier)
        with pytest.raises(UnknownCode):
            type_codes.funds_type('X')

    def test_unknown_code_is_value_error(self):
        assert issubclass(UnknownCode, ValueError)


class TestTypeCodes(object):

    def test_lookup(self):
        tc = type_codes.lookup(15)
        assert tc == type_codes.TypeCode(15, 'NA', 'status', 'Closing Ledger')
        assert tc.code == 15

        tc = type_codes.lookup(475)
        assert tc.transaction == 'DB'
        assert tc.level == 'detail'
        assert tc.description == 'Check Paid'

    def test_custom_ranges(self):
        assert type_codes.lookup(905).level == 'summary'
        assert type_codes.lookup(905).transaction == 'CR'
        assert type_codes.lookup(930).level == 'detail'
        assert type_codes.lookup(965).transaction == 'DB'
        tc = type_codes.lookup(999)
        assert tc.level == 'detail'
        assert tc.description == 'Customized debit detail'

    def test_unknown(self):
        with pytest.raises(UnknownCode):
            type_codes.lookup(2)
        with pytest.raises(UnknownCode):
            type_codes.lookup(1000)

    def test_levels(self):
        assert type_codes.lookup(10).level == 'status'
        assert type_codes.lookup(100).level == 'summary'
        assert type_codes.detail_code(195).transaction == 'CR'
        with pytest.raises(UnknownCode):
            type_codes.detail_code(10)
        with pytest.raises(UnknownCode):
            type_codes.detail_code(100)

    def test_table_consistency(self):
        for code, (transaction, level, description) in \
                type_codes.type_codes.items():
            assert 0 < code < 900
            assert transaction in ('CR', 'DB', 'NA')
            assert level in ('status', 'summary', 'detail')
            assert description
