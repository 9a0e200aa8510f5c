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

from collections import namedtuple
from decimal import Decimal

import babel.numbers

from bai2 import config

Money = namedtuple('Money', 'amount currency')


def parse_currency(code):
    "Return the ISO 4217 code if it is a currency known to babel."
    if code not in babel.numbers.list_currencies():
        raise ValueError('Unknown currency code: %r' % code)
    return code


def default_currency():
    return parse_currency(config.default_currency())


def to_money(amount, currency):
    """Turn an integer amount in minor units into Money.

    The number of decimals comes from the currency, 12345 is 123.45 USD
    but 12345 JPY.
    """
    precision = babel.numbers.get_currency_precision(currency)
    return Money(Decimal(amount).scaleb(-precision), currency)


def format_money(money, locale='en_US'):
    return babel.numbers.format_currency(money.amount, money.currency,
                                         locale=locale)
