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


class FileProcessError(Exception):
    "Base class of everything that aborts processing of a transmission."


class LexError(FileProcessError):
    """The input could not be split into records.

    lineno is 1-based, offset is the byte offset of the problem
    from the start of the input.
    """

    def __init__(self, lineno, offset, reason):
        super(LexError, self).__init__(lineno, offset, reason)
        self.lineno = lineno
        self.offset = offset
        self.reason = reason

    def __str__(self):
        return 'Line %d (byte %d): %s' % (self.lineno, self.offset, self.reason)


class FieldParseError(FileProcessError):
    """A field of a record did not match the grammar of the record.

    kind is one of 'malformed', 'missing', 'unknown code' or 'arity'.
    index is the 1-based position of the field after the record code.
    """

    def __init__(self, record, index, reason, kind='malformed'):
        super(FieldParseError, self).__init__(record, index, reason, kind)
        self.record = record
        self.index = index
        self.reason = reason
        self.kind = kind

    def __str__(self):
        return 'Line %d, record %s, field %d: %s' % (
            self.record.lineno, self.record.code, self.index, self.reason)


class UnfinishedConversion(FileProcessError):
    "The input ended while a file, group or account was still open."

    def __init__(self, state):
        super(UnfinishedConversion, self).__init__(state)
        self.state = state

    def __str__(self):
        if self.state == 'start':
            return 'No file header found'
        return 'Input ended with an open %s' % self.state


class ConversionError(FileProcessError):
    "A well formed record appeared where it is not allowed."

    def __init__(self, record, expected, seen):
        super(ConversionError, self).__init__(record, expected, seen)
        self.record = record
        self.expected = expected
        self.seen = seen

    def __str__(self):
        return 'Line %d: expected %s, got %s' % (
            self.record.lineno, self.expected, self.seen)
