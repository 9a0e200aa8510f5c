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

from bai2 import config, records
from bai2.convert import Converter

log = config.getLogger(__name__)


def process_file(data, check_control_totals=None, encoding=None):
    """Convert a complete BAI2 transmission (bytes) to a bai2.model.File.

    Raises one of the bai2.exceptions on the first problem found, no
    partial document is ever returned.
    """
    log.debug('Processing %d bytes', len(data))
    recs = (records.parse_record(raw)
            for raw in records.parse_lines(data, encoding))
    return Converter.fold(recs, check_control_totals)


def read_file(stream, check_control_totals=None, encoding=None):
    if encoding is None:
        encoding = config.encoding()
    data = stream.read()
    if isinstance(data, str):
        data = data.encode(encoding)
    return process_file(data, check_control_totals, encoding)
