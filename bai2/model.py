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

"""The document produced from a BAI2 transmission.

File -> Group -> Account -> AccountInfo / TransactionDetail. All
amounts are integers in the minor unit of the effective currency.
Currencies are stored as transmitted, use Group.currency_def() and
Account.currency_def() to get the effective currency.
"""

import datetime

from bai2 import currency

# Marker returned for the BAI2 times 2400 and 9999
END_OF_DAY = 'EOD'


class Value(object):

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    def __repr__(self):
        return '%s(%s)' % (type(self).__name__, ', '.join(
            '%s=%r' % item for item in vars(self).items()))


class BaiDate(Value):
    "A date without time."

    def __init__(self, value):
        self.value = value

    def date(self):
        return self.value

    def time(self):
        return None

    def date_time(self):
        return None

    def __str__(self):
        return self.value.isoformat()


class BaiDateTime(Value):

    def __init__(self, value):
        self.value = value

    def date(self):
        return self.value.date()

    def time(self):
        return self.value.time()

    def date_time(self):
        return self

    def __str__(self):
        return self.value.isoformat(' ')


class BaiEndOfDay(Value):
    "End of business on a date, distinct from any timed instant."

    def __init__(self, value):
        self.value = value

    def date(self):
        return self.value

    def time(self):
        return None

    def date_time(self):
        return self

    def __str__(self):
        return '%sTeod' % self.value.isoformat()


def bai_date_time(date, time):
    if time == END_OF_DAY:
        return BaiEndOfDay(date)
    return BaiDateTime(datetime.datetime.combine(date, time))


def bai_date_or_time(date, time=None):
    if time is None:
        return BaiDate(date)
    return bai_date_time(date, time)


class File(Value):

    def __init__(self, sender, receiver, creation, ident, groups=None):
        self.sender = sender
        self.receiver = receiver
        self.creation = creation
        self.ident = ident
        self.groups = groups if groups is not None else []

    def control_total(self):
        return sum(group.control_total() for group in self.groups)


class Group(Value):

    def __init__(self, ultimate_receiver, originator, status, as_of,
                 currency=None, as_of_date_mod=None, accounts=None):
        self.ultimate_receiver = ultimate_receiver
        # Optional, many banks leave it out
        self.originator = originator
        self.status = status
        self.as_of = as_of
        self.currency = currency
        self.as_of_date_mod = as_of_date_mod
        self.accounts = accounts if accounts is not None else []

    def currency_def(self):
        if self.currency is not None:
            return self.currency
        return currency.default_currency()

    def account_currency(self, account):
        return account.currency_def(self.currency_def())

    def control_total(self):
        return sum(account.control_total() for account in self.accounts)


class Account(Value):

    def __init__(self, customer_account, currency=None, infos=None,
                 transaction_details=None):
        self.customer_account = customer_account
        self.currency = currency
        self.infos = infos if infos is not None else []
        self.transaction_details = (transaction_details
                                    if transaction_details is not None else [])

    def currency_def(self, group_currency):
        if self.currency is not None:
            return self.currency
        return group_currency

    def control_total(self):
        "Algebraic sum of all info and transaction detail amounts."
        total = 0
        for entry in self.infos + self.transaction_details:
            if entry.amount is not None:
                total += entry.amount
        return total


class AccountInfo(Value):

    def amount_money(self, account_currency):
        if self.amount is None:
            return None
        return currency.to_money(self.amount, account_currency)


class Summary(AccountInfo):
    "Totals, the amount is never negative."

    def __init__(self, code, amount=None, item_count=None, funds=None):
        if amount is not None and amount < 0:
            raise ValueError('Summary amount can not be negative: %d' % amount)
        self.code = code
        self.amount = amount
        self.item_count = item_count
        self.funds = funds


class Status(AccountInfo):
    "Point in time balances, the amount may be signed."

    def __init__(self, code, amount=None, funds=None):
        self.code = code
        self.amount = amount
        self.funds = funds


class FundsType(Value):
    qualifier = None


class UnknownAvail(FundsType):
    qualifier = 'Z'


class ImmediateAvail(FundsType):
    qualifier = '0'


class OneDayAvail(FundsType):
    qualifier = '1'


class TwoOrMoreDaysAvail(FundsType):
    qualifier = '2'


class DistributedAvailS(FundsType):
    qualifier = 'S'

    # All optional, the examples in the BAI2 standard leave some empty
    def __init__(self, immediate=None, one_day=None, more_than_one_day=None):
        self.immediate = immediate
        self.one_day = one_day
        self.more_than_one_day = more_than_one_day


class ValueDated(FundsType):
    qualifier = 'V'

    def __init__(self, value_date):
        self.value_date = value_date


class DistributedAvailD(FundsType):
    qualifier = 'D'

    def __init__(self, distributions=None):
        self.distributions = distributions if distributions is not None else []


class DistributedAvailDistribution(Value):

    def __init__(self, days, amount):
        self.days = days
        self.amount = amount

    def amount_money(self, funds_currency):
        return currency.to_money(self.amount, funds_currency)


class TransactionDetail(Value):

    def __init__(self, code, amount=None, funds=None, bank_ref_num=None,
                 customer_ref_num=None, text=None):
        self.code = code
        self.amount = amount
        self.funds = funds
        self.bank_ref_num = bank_ref_num
        self.customer_ref_num = customer_ref_num
        self.text = text

    def amount_money(self, account_currency):
        if self.amount is None:
            return None
        return currency.to_money(self.amount, account_currency)
