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

"""Human readable dump of a bai2.model.File, for debugging."""

from bai2 import currency, model


class Writer(object):

    indentation = '    '

    def __init__(self):
        self.lines = []
        self.level = 0

    def line(self, text):
        self.lines.append(self.indentation * self.level + text)

    def open(self, text):
        self.line(text)
        self.level += 1

    def close(self, text='}'):
        self.level -= 1
        self.line(text)

    def getvalue(self):
        return '\n'.join(self.lines) + '\n'


def render(file):
    writer = Writer()
    render_file(writer, file)
    return writer.getvalue()


def money(amount, account_currency):
    if amount is None:
        return 'no amount'
    return currency.format_money(currency.to_money(amount, account_currency))


def render_file(writer, file):
    writer.open('File: "%s" to "%s" at %s (#%d) {' % (
        file.sender, file.receiver, file.creation, file.ident))
    for group in file.groups:
        render_group(writer, group)
    writer.close()


def render_group(writer, group):
    text = 'Group %s: %s' % (group.status,
                             group.originator or 'Unknown originator')
    if group.ultimate_receiver:
        text += ' to %s' % group.ultimate_receiver
    text += ' at %s' % group.as_of
    if group.as_of_date_mod:
        text += ' (%s)' % group.as_of_date_mod
    writer.open('%s in %s {' % (text, group.currency_def()))
    for account in group.accounts:
        render_account(writer, account, group.account_currency(account))
    writer.close()


def render_account(writer, account, account_currency):
    text = 'Account %s' % account.customer_account
    if account.currency:
        text += ' (%s)' % account.currency
    writer.open(text + ' {')
    writer.open('Infos: [')
    for info in account.infos:
        render_info(writer, info, account_currency)
    writer.close(']')
    writer.open('Transaction Details: [')
    for detail in account.transaction_details:
        render_detail(writer, detail, account_currency)
    writer.close(']')
    writer.close()


def code_name(code):
    return '%03d %s' % (code.code, code.description)


def render_info(writer, info, account_currency):
    text = '%s: %s' % (code_name(info.code),
                       money(info.amount, account_currency))
    item_count = getattr(info, 'item_count', None)
    if item_count is None and info.funds is None:
        writer.line(text)
        return
    writer.open(text + ' {')
    if item_count is not None:
        writer.line('Item count: %d' % item_count)
    if info.funds is not None:
        render_funds(writer, info.funds, account_currency)
    writer.close()


funds_names = {
    model.UnknownAvail: 'Funds',
    model.ImmediateAvail: 'Funds(Immediate)',
    model.OneDayAvail: 'Funds(One day)',
    model.TwoOrMoreDaysAvail: 'Funds(Two+ days)',
    }


def render_funds(writer, funds, account_currency):
    if type(funds) in funds_names:
        writer.line(funds_names[type(funds)])
    elif isinstance(funds, model.ValueDated):
        writer.line('Funds(Value dated): %s' % funds.value_date)
    elif isinstance(funds, model.DistributedAvailS):
        writer.open('Funds(Distributed avail) {')
        for label, amount in [('Immediate avail', funds.immediate),
                              ('One-day avail', funds.one_day),
                              ('Two or more days avail',
                               funds.more_than_one_day)]:
            if amount is not None:
                writer.line('%s: %s' % (label, money(amount,
                                                     account_currency)))
        writer.close()
    else:
        writer.open('Funds(Distributed avail) [')
        for dist in funds.distributions:
            writer.line('%d days: %s' % (dist.days, money(dist.amount,
                                                          account_currency)))
        writer.close(']')


def render_detail(writer, detail, account_currency):
    writer.open('Transaction: %s: %s {' % (
        code_name(detail.code), money(detail.amount, account_currency)))
    if detail.funds is not None:
        render_funds(writer, detail.funds, account_currency)
    if detail.bank_ref_num is not None:
        writer.line('Bank: %s' % detail.bank_ref_num)
    if detail.customer_ref_num is not None:
        writer.line('Customer: %s' % detail.customer_ref_num)
    for line in detail.text or []:
        writer.line('Text: %s' % line)
    writer.close()
