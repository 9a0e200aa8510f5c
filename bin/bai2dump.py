#!/usr/bin/env python

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

"""Parse a BAI2 file and dump it as text or JSON."""

import argparse
import sys

import bai2
from bai2 import config, exceptions, jsonserialization, render


def main(argv=None, out=sys.stdout):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--json', action='store_true',
                        help='dump as JSON instead of text')
    parser.add_argument('--strict', action='store_true',
                        help='check trailer control totals and counts')
    parser.add_argument('file')

    args = parser.parse_args(argv)

    config.setup_logging()
    log = config.getLogger('bai2dump')

    try:
        with open(args.file, 'rb') as f:
            statement = bai2.read_file(f, check_control_totals=args.strict
                                       or None)
    except exceptions.FileProcessError as e:
        log.error('%s: %s', args.file, e)
        raise SystemExit(1)

    if args.json:
        out.write(jsonserialization.dumps(statement, indent=2))
        out.write('\n')
    else:
        out.write(render.render(statement))


if __name__ == '__main__':
    main()
