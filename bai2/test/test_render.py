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

import os
import bai2
from bai2 import model, render, type_codes

here = os.path.dirname(__file__)


def sample():
    with open(os.path.join(here, 'sample.bai'), 'rb') as f:
        return bai2.read_file(f)


class TestRender(object):

    def setup_method(self, method):
        self.text = render.render(sample())
        self.lines = self.text.splitlines()

    def test_structure(self):
        assert self.lines[0] == ('File: "122099999" to "123456789" at '
                                 '2004-06-21 02:00:00 (#1) {')
        assert self.lines[-1] == '}'
        assert self.text.endswith('}\n')
        assert self.lines[1] == (
            '    Group Update: 122099999 to 031001234 at 2004-06-20 23:59:00 '
            '(Final previous-day data) in USD {')
        assert self.lines[2] == '        Account 0975312468 (GBP) {'
        assert self.lines[3] == '            Infos: ['
        assert self.lines[4] == '                010 Opening Ledger: \xa35,000.00'

    def test_group_without_originator(self):
        assert ('    Group Test Only: Unknown originator to 123456789 at '
                '2004-06-21Teod (Final same-day data) in CAD {') in self.lines

    def test_detail(self):
        stripped = [line.strip() for line in self.lines]
        start = stripped.index(
            'Transaction: 195 Incoming Money Transfer: \xa310,000.00 {')
        assert stripped[start + 1:start + 7] == [
            'Funds(Immediate)',
            'Bank: BANKREF1',
            'Customer: CUSTREF1',
            'Text: INCOMING WIRE',
            'Text: FROM ACME CORP',
            '}']

    def test_funds(self):
        stripped = [line.strip() for line in self.lines]
        start = stripped.index('Funds(Distributed avail) [')
        assert stripped[start + 1:start + 5] == [
            '0 days: \xa35,000.00',
            '1 days: \xa33,000.00',
            '2 days: \xa32,000.00',
            ']']
        start = stripped.index('400 Total Debits: \xa315,000.00 {')
        assert stripped[start + 1:start + 4] == [
            'Item count: 3',
            'Funds(Value dated): 2004-06-21 12:00:00',
            '}']

    def test_account_currency_used(self):
        stripped = [line.strip() for line in self.lines]
        assert '040 Opening Available: -$2,500.00 {' in stripped

    def test_distributed_s(self):
        writer = render.Writer()
        render.render_funds(writer, model.DistributedAvailS(100, None, 5),
                            'USD')
        assert writer.getvalue() == (
            'Funds(Distributed avail) {\n'
            '    Immediate avail: $1.00\n'
            '    Two or more days avail: $0.05\n'
            '}\n')

    def test_no_amount(self):
        writer = render.Writer()
        render.render_info(writer, model.Status(type_codes.lookup(15)), 'USD')
        assert writer.getvalue() == '015 Closing Ledger: no amount\n'
