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

"""Split a BAI2 transmission into records and decode their fields.

Every physical line is one record: a two digit record code, a comma,
comma separated fields and a '/' that ends the record. Fields after
the '/' (or after the end of the line) are defaulted, as are empty
fields. Nothing here looks at more than one line at a time, merging
continuation records is done by bai2.convert.
"""

import re
from collections import namedtuple
from datetime import datetime

from bai2 import config, currency, model, type_codes
from bai2.exceptions import FieldParseError, LexError

RawRecord = namedtuple('RawRecord', 'lineno offset code text')


def parse_lines(data, encoding=None):
    "Generate a RawRecord for every non blank line in data (bytes)."
    if encoding is None:
        encoding = config.encoding()
    offset = 0
    for lineno, line in enumerate(data.split(b'\n'), 1):
        start = offset
        offset += len(line) + 1
        line = line.rstrip()
        if not line:
            continue
        try:
            text = line.decode(encoding)
        except UnicodeDecodeError as e:
            raise LexError(lineno, start + e.start,
                           'Can not decode byte %r as %s' % (
                               line[e.start:e.start + 1], encoding))
        code = text[:2]
        if not re.match(r'\d\d([,/]|$)', text):
            raise LexError(lineno, start, 'Malformed record code %r' % code)
        if code not in record_types:
            raise LexError(lineno, start, 'Unknown record type %s' % code)
        if text[2:3] == ',':
            text = text[3:]
        else:
            text = text[2:]
        yield RawRecord(lineno, start, code, text)


def parse_record(raw):
    return record_types[raw.code].parse(raw)


class FieldReader(object):
    "Walk the fields of one record."

    def __init__(self, raw):
        self.raw = raw
        self.s = raw.text
        self.pos = 0
        self.index = 0  # 1-based number of the last field read

    def at_end(self):
        return self.pos >= len(self.s) or self.s[self.pos] == '/'

    def next(self):
        "Return the next field, None if it is empty or defaulted."
        self.index += 1
        if self.at_end():
            return None
        end = self.pos
        while end < len(self.s) and self.s[end] not in ',/':
            end += 1
        field = self.s[self.pos:end].strip()
        if end < len(self.s) and self.s[end] == ',':
            end += 1
        self.pos = end
        return field or None

    def rest(self):
        "Return the rest of the line as free text, commas included."
        self.index += 1
        text = self.s[self.pos:]
        self.pos = len(self.s)
        if text.endswith('/'):
            text = text[:-1]
        return text.rstrip()

    def finish(self):
        if not self.at_end():
            raise self.error('Too many fields', index=self.index + 1,
                             kind='arity')
        if self.s[self.pos + 1:].strip():
            raise self.error('Data after record terminator',
                             index=self.index + 1, kind='arity')

    def error(self, reason, index=None, kind='malformed'):
        if index is None:
            index = self.index
        return FieldParseError(self.raw, index, reason, kind)


# Field decoders, keyed by the letters used in the fielddefs below.
# A trailing '?' on a field type makes the field optional.
# T = Text
# U = Unsigned integer
# A = Amount, unsigned, may have a leading +
# S = Signed amount
# K = Type code, three digits
# C = Currency code
# G = Group status
# M = As-of-date modifier
# d = Date YYMMDD
# t = Time HHMM, 2400 and 9999 mean end of day

def _unsigned(value):
    if not value.isdigit():
        raise ValueError('Expected unsigned integer, got %r' % value)
    return int(value)


def _amount(value):
    if not re.match(r'\+?\d+$', value):
        raise ValueError('Expected unsigned amount, got %r' % value)
    return int(value)


def _signed(value):
    if not re.match(r'[+-]?\d+$', value):
        raise ValueError('Expected signed amount, got %r' % value)
    return int(value)


def _type_code(value):
    if not re.match(r'\d\d\d$', value):
        raise ValueError('Expected three digit type code, got %r' % value)
    return int(value)


def _date(value):
    if not re.match(r'\d{6}$', value):
        raise ValueError('Expected date YYMMDD, got %r' % value)
    return datetime.strptime(value, '%y%m%d').date()


def _time(value):
    if value in ('2400', '9999'):
        return model.END_OF_DAY
    if not re.match(r'\d{4}$', value):
        raise ValueError('Expected time HHMM, got %r' % value)
    return datetime.strptime(value, '%H%M').time()


def _group_status(value):
    return type_codes.group_status(_unsigned(value))


def _as_of_date_modifier(value):
    return type_codes.as_of_date_modifier(_unsigned(value))


decoders = {
    'T': lambda value: value,
    'U': _unsigned,
    'A': _amount,
    'S': _signed,
    'K': _type_code,
    'C': currency.parse_currency,
    'G': _group_status,
    'M': _as_of_date_modifier,
    'd': _date,
    't': _time,
    }


def decode(reader, field_type):
    optional = field_type.endswith('?')
    decoder = decoders[field_type.rstrip('?')]
    value = reader.next()
    if value is None:
        if optional:
            return None
        raise reader.error('Missing mandatory field', kind='missing')
    try:
        return decoder(value)
    except type_codes.UnknownCode as e:
        raise reader.error(str(e), kind='unknown code')
    except ValueError as e:
        raise reader.error(str(e))


class PendingDistribution(object):
    "A D funds type whose days/amount pairs continue on the next record."

    def __init__(self, funds, remaining):
        self.funds = funds
        self.remaining = remaining
        self.days = None

    def resume(self, reader):
        read_pairs(reader, self)


class PendingFields(object):
    "An S or V funds type whose fields continue on the next record."

    def __init__(self, funds, fields, build):
        self.funds = funds
        self.fields = list(fields)
        self.build = build
        self.values = {}

    @property
    def remaining(self):
        return len(self.fields)

    def resume(self, reader):
        while self.fields and not reader.at_end():
            name, field_type = self.fields.pop(0)
            self.values[name] = decode(reader, field_type)
        self.build(self.funds, self.values)


def read_pairs(reader, pending):
    while pending.remaining:
        if reader.at_end():
            return
        if pending.days is None:
            pending.days = decode(reader, 'U')
            if reader.at_end():
                return
        amount = decode(reader, 'S')
        pending.funds.distributions.append(
            model.DistributedAvailDistribution(pending.days, amount))
        pending.days = None
        pending.remaining -= 1


def _build_distributed_s(funds, values):
    for name, amount in values.items():
        setattr(funds, name, amount)


def _build_value_dated(funds, values):
    funds.value_date = model.bai_date_or_time(values['date'],
                                              values.get('time'))


def read_funds(reader):
    """Read a funds type and the fields that belong to it.

    Returns (funds, pending). pending is set if the record ended before
    the fields of an S, V or D funds type were all read, its resume()
    reads the rest from the next continuation record. The value date of
    V must be on the same record as the qualifier.
    """
    qualifier = reader.next()
    if qualifier is None:
        return None, None
    try:
        type_codes.funds_type(qualifier)
    except type_codes.UnknownCode as e:
        raise reader.error(str(e), kind='unknown code')
    if qualifier == 'S':
        pending = PendingFields(model.DistributedAvailS(),
                                [('immediate', 'S?'), ('one_day', 'S?'),
                                 ('more_than_one_day', 'S?')],
                                _build_distributed_s)
    elif qualifier == 'V':
        pending = PendingFields(model.ValueDated(None),
                                [('date', 'd'), ('time', 't?')],
                                _build_value_dated)
        if reader.at_end():
            raise reader.error('Missing value date', index=reader.index + 1,
                               kind='missing')
    elif qualifier == 'D':
        pending = PendingDistribution(model.DistributedAvailD(),
                                      decode(reader, 'U'))
    else:
        return simple_funds[qualifier](), None
    pending.resume(reader)
    return pending.funds, pending if pending.remaining else None


simple_funds = {
    'Z': model.UnknownAvail,
    '0': model.ImmediateAvail,
    '1': model.OneDayAvail,
    '2': model.TwoOrMoreDaysAvail,
    }


def read_infos(reader):
    """Read account info groups until the end of the record.

    Each group is type code, amount, item count and funds type. Returns
    (infos, pending), see read_funds().
    """
    infos = []
    while not reader.at_end():
        code = decode(reader, 'K?')
        if code is None:
            # A completely empty group is padding
            if any(reader.next() for i in range(3)):
                raise reader.error('Account info without type code')
            continue
        try:
            tc = type_codes.lookup(code)
        except type_codes.UnknownCode as e:
            raise reader.error(str(e), kind='unknown code')
        if tc.level == 'status':
            amount = decode(reader, 'S?')
            decode(reader, 'U?')  # item count, not used for status
            funds, pending = read_funds(reader)
            infos.append(model.Status(tc, amount, funds))
        elif tc.level == 'summary':
            amount = decode(reader, 'A?')
            item_count = decode(reader, 'U?')
            funds, pending = read_funds(reader)
            infos.append(model.Summary(tc, amount, item_count, funds))
        else:
            raise reader.error('Detail type code %03d in account record' % code,
                               kind='unknown code')
        if pending is not None:
            return infos, pending
    return infos, None


# The fields of a transaction detail, in record order. A detail record
# may be cut short anywhere and continued by 88 records.
detail_stages = ['amount', 'funds', 'funds_tail', 'bank_ref_num',
                 'customer_ref_num', 'text']


def read_detail(reader, stage, pending=None):
    """Read transaction detail fields, starting with stage.

    Returns (values, stage, pending), stage is the field to continue
    with on the next continuation record.
    """
    values = {}
    while not reader.at_end():
        if stage == 'amount':
            values['amount'] = decode(reader, 'S?')
            stage = 'funds'
        elif stage == 'funds':
            values['funds'], pending = read_funds(reader)
            stage = 'funds_tail'
        elif stage == 'funds_tail':
            if pending is not None:
                pending.resume(reader)
                if pending.remaining:
                    break
                pending = None
            stage = 'bank_ref_num'
        elif stage in ('bank_ref_num', 'customer_ref_num'):
            values[stage] = decode(reader, 'T?')
            stage = detail_stages[detail_stages.index(stage) + 1]
        else:
            values['text'] = [reader.rest()]
    if stage == 'funds_tail' and pending is None:
        stage = 'bank_ref_num'
    return values, stage, pending


class Record(object):
    code = None
    name = None
    fielddefs = []

    def __init__(self, lineno, **fields):
        self.lineno = lineno
        for name, value in fields.items():
            setattr(self, name, value)

    @classmethod
    def parse(cls, raw):
        reader = FieldReader(raw)
        fields = {}
        for name, field_type in cls.fielddefs:
            fields[name] = decode(reader, field_type)
        reader.finish()
        return cls(raw.lineno, **fields)

    def __repr__(self):
        return '<%s line %d>' % (type(self).__name__, self.lineno)


class FileHeader(Record):
    code = '01'
    name = 'file header'
    fielddefs = [('sender', 'T'), ('receiver', 'T'),
                 ('creation_date', 'd'), ('creation_time', 't'),
                 ('ident', 'U'), ('record_length', 'U?'),
                 ('block_size', 'U?'), ('version', 'U?')]

    @property
    def creation(self):
        return model.bai_date_time(self.creation_date, self.creation_time)


class GroupHeader(Record):
    code = '02'
    name = 'group header'
    fielddefs = [('ultimate_receiver', 'T?'), ('originator', 'T?'),
                 ('status', 'G'), ('as_of_date', 'd'), ('as_of_time', 't?'),
                 ('currency', 'C?'), ('as_of_date_mod', 'M?')]

    @property
    def as_of(self):
        return model.bai_date_or_time(self.as_of_date, self.as_of_time)


class AccountIdentifier(Record):
    code = '03'
    name = 'account identifier'

    @classmethod
    def parse(cls, raw):
        reader = FieldReader(raw)
        customer_account = decode(reader, 'T')
        currency = decode(reader, 'C?')
        infos, pending = read_infos(reader)
        reader.finish()
        return cls(raw.lineno, customer_account=customer_account,
                   currency=currency, infos=infos, pending=pending)


class TransactionDetailRecord(Record):
    code = '16'
    name = 'transaction detail'

    @classmethod
    def parse(cls, raw):
        reader = FieldReader(raw)
        code = decode(reader, 'K')
        try:
            tc = type_codes.detail_code(code)
        except type_codes.UnknownCode as e:
            raise reader.error(str(e), kind='unknown code')
        values, stage, pending = read_detail(reader, 'amount')
        reader.finish()
        return cls(raw.lineno, type_code=tc, values=values, stage=stage,
                   pending=pending)


class Continuation(Record):
    code = '88'
    name = 'continuation'

    @classmethod
    def parse(cls, raw):
        return cls(raw.lineno, raw=raw)

    def fields(self):
        return FieldReader(self.raw)


class AccountTrailer(Record):
    code = '49'
    name = 'account trailer'
    fielddefs = [('control_total', 'S'), ('record_count', 'U')]


class GroupTrailer(Record):
    code = '98'
    name = 'group trailer'
    fielddefs = [('control_total', 'S'), ('account_count', 'U'),
                 ('record_count', 'U')]


class FileTrailer(Record):
    code = '99'
    name = 'file trailer'
    fielddefs = [('control_total', 'S'), ('group_count', 'U'),
                 ('record_count', 'U')]


record_types = dict((cls.code, cls) for cls in [
    FileHeader, GroupHeader, AccountIdentifier, TransactionDetailRecord,
    Continuation, AccountTrailer, GroupTrailer, FileTrailer])
