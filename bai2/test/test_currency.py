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

from decimal import Decimal
import pytest
from bai2 import config, currency


class TestCurrency(object):

    def setup_method(self, method):
        self.config = config.save()

    def teardown_method(self, method):
        config.restore(self.config)

    def test_parse_currency(self):
        assert currency.parse_currency('USD') == 'USD'
        assert currency.parse_currency('GBP') == 'GBP'
        with pytest.raises(ValueError):
            currency.parse_currency('XXQ')
        with pytest.raises(ValueError):
            currency.parse_currency('usd')

    def test_default_currency(self):
        assert currency.default_currency() == 'USD'
        config.config.set('bai2', 'default_currency', 'EUR')
        assert currency.default_currency() == 'EUR'

    def test_bad_default_currency(self):
        config.config.set('bai2', 'default_currency', 'FOO')
        with pytest.raises(ValueError):
            currency.default_currency()

    def test_to_money(self):
        money = currency.to_money(12345, 'USD')
        assert money == currency.Money(Decimal('123.45'), 'USD')
        assert currency.to_money(-500, 'USD').amount == Decimal('-5.00')
        assert currency.to_money(12345, 'JPY').amount == Decimal('12345')

    def test_format_money(self):
        money = currency.to_money(123456, 'USD')
        assert currency.format_money(money) == '$1,234.56'
