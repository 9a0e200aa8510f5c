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

"""Assemble parsed records into a bai2.model.File.

The Converter is fed one record at a time and tracks which of file,
group and account is open. Continuation records are merged into the
target left behind by the previous account identifier or transaction
detail record.
"""

from bai2 import config, model, records
from bai2.exceptions import ConversionError, UnfinishedConversion

log = config.getLogger(__name__)


class InfoTarget(object):
    "Continuation of an account identifier: more account info groups."

    def __init__(self, account, pending=None):
        self.account = account
        self.pending = pending

    def merge(self, reader):
        if self.pending is not None:
            self.pending.resume(reader)
            if self.pending.remaining:
                reader.finish()
                return
            self.pending = None
        infos, self.pending = records.read_infos(reader)
        self.account.infos.extend(infos)
        reader.finish()


class DetailTarget(object):
    "Continuation of a transaction detail, the fields not yet seen."

    def __init__(self, detail, stage, pending=None):
        self.detail = detail
        self.stage = stage
        self.pending = pending

    def merge(self, reader):
        if self.stage == 'text':
            # Each continuation of the text is one more line, even if empty
            self.add_text(reader.rest())
            return
        values, self.stage, self.pending = records.read_detail(
            reader, self.stage, self.pending)
        reader.finish()
        self.update(values)

    def update(self, values):
        for name, value in values.items():
            if name == 'text':
                for line in value:
                    self.add_text(line)
            else:
                setattr(self.detail, name, value)

    def add_text(self, line):
        if self.detail.text is None:
            self.detail.text = []
        self.detail.text.append(line)


class Converter(object):

    def __init__(self, check_control_totals=None):
        if check_control_totals is None:
            check_control_totals = config.check_control_totals()
        self.check_control_totals = check_control_totals
        self.state = 'start'
        self.file = self.group = self.account = None
        self.target = None
        # Records seen so far by each open level, for the trailers
        self.counts = {}

    @classmethod
    def fold(cls, recs, check_control_totals=None):
        converter = cls(check_control_totals)
        for record in recs:
            converter.feed(record)
        return converter.finish()

    def feed(self, record):
        if self.state == 'done':
            raise ConversionError(record, 'end of input', record.name)
        try:
            method = transitions[self.state][record.code]
        except KeyError:
            raise ConversionError(record, expected[self.state], record.name)
        if record.code != records.Continuation.code:
            self.target = None
        for level in self.counts:
            self.counts[level] += 1
        method(self, record)

    def finish(self):
        if self.state != 'done':
            raise UnfinishedConversion(self.state)
        log.info('Converted file %s from %s: %d groups',
                 self.file.ident, self.file.sender, len(self.file.groups))
        return self.file

    def transition(self, state):
        log.debug('%s -> %s', self.state, state)
        self.state = state

    def file_header(self, record):
        if record.version is not None and record.version != 2:
            log.warning('Line %d: BAI file version %d, expected 2',
                        record.lineno, record.version)
        self.file = model.File(record.sender, record.receiver,
                               record.creation, record.ident)
        self.counts['file'] = 1
        self.transition('file')

    def group_header(self, record):
        self.group = model.Group(record.ultimate_receiver, record.originator,
                                 record.status, record.as_of,
                                 currency=record.currency,
                                 as_of_date_mod=record.as_of_date_mod)
        self.counts['group'] = 1
        self.transition('group')

    def account_identifier(self, record):
        self.account = model.Account(record.customer_account,
                                     currency=record.currency,
                                     infos=list(record.infos))
        self.target = InfoTarget(self.account, record.pending)
        self.counts['account'] = 1
        self.transition('account')

    def transaction_detail(self, record):
        detail = model.TransactionDetail(record.type_code)
        self.target = DetailTarget(detail, record.stage, record.pending)
        self.target.update(record.values)
        self.account.transaction_details.append(detail)

    def continuation(self, record):
        # 88 is only accepted in an account, where 03 or 16 left a target
        self.target.merge(record.fields())

    def account_trailer(self, record):
        self.check(record, 'account', self.account.control_total())
        del self.counts['account']
        self.group.accounts.append(self.account)
        self.account = None
        self.transition('group')

    def group_trailer(self, record):
        self.check(record, 'group', self.group.control_total())
        self.check_count(record, 'number of accounts', record.account_count,
                         len(self.group.accounts))
        del self.counts['group']
        self.file.groups.append(self.group)
        self.group = None
        self.transition('file')

    def file_trailer(self, record):
        self.check(record, 'file', self.file.control_total())
        self.check_count(record, 'number of groups', record.group_count,
                         len(self.file.groups))
        del self.counts['file']
        self.transition('done')

    def check(self, record, level, control_total):
        self.check_count(record, '%s control total' % level,
                         record.control_total, control_total)
        self.check_count(record, 'number of records in %s' % level,
                         record.record_count, self.counts[level])

    def check_count(self, record, what, declared, actual):
        if not self.check_control_totals or declared == actual:
            return
        raise ConversionError(record, '%s %d' % (what, actual),
                              '%s %d' % (what, declared))


transitions = {
    'start': {'01': Converter.file_header},
    'file': {'02': Converter.group_header, '99': Converter.file_trailer},
    'group': {'03': Converter.account_identifier,
              '98': Converter.group_trailer},
    'account': {'16': Converter.transaction_detail,
                '88': Converter.continuation,
                '49': Converter.account_trailer},
    }

expected = {
    'start': 'file header',
    'file': 'group header or file trailer',
    'group': 'account identifier or group trailer',
    'account': 'transaction detail, continuation or account trailer',
    }
