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

import io
import os
import pytest
import simplejson
from bai2 import config
from .. import bai2dump

root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
sample = os.path.join(root, 'bai2', 'test', 'sample.bai')


class TestMain(object):

    def setup_method(self, method):
        self.config = config.save()

    def teardown_method(self, method):
        config.restore(self.config)

    @pytest.fixture(autouse=True)
    def no_logging_setup(self, monkeypatch):
        calls = []
        monkeypatch.setattr(config, 'setup_logging',
                            lambda: calls.append(True))
        self.logging_setup = calls

    def test_text(self):
        out = io.StringIO()
        bai2dump.main([sample], out=out)
        text = out.getvalue()
        assert text.startswith('File: "122099999" to "123456789"')
        assert 'Account 5555' in text
        assert self.logging_setup == [True]

    def test_json(self):
        out = io.StringIO()
        bai2dump.main(['--json', sample], out=out)
        result = simplejson.loads(out.getvalue())
        assert result['__class__'] == 'File'
        assert len(result['groups']) == 2

    def test_strict(self, tmpdir):
        with open(sample) as f:
            data = f.read().replace('49,0,3/', '49,0,4/')
        broken = tmpdir.join('broken.bai')
        broken.write(data)

        out = io.StringIO()
        bai2dump.main([str(broken)], out=out)
        assert 'Account 9876543210' in out.getvalue()

        out = io.StringIO()
        with pytest.raises(SystemExit) as exc:
            bai2dump.main(['--strict', str(broken)], out=out)
        assert exc.value.code == 1
        assert out.getvalue() == ''

    def test_parse_error(self, tmpdir, caplog):
        broken = tmpdir.join('broken.bai')
        broken.write('01,A,B,040621,0200,1/\n02,,,1,040620/\n')
        with pytest.raises(SystemExit) as exc:
            bai2dump.main([str(broken)], out=io.StringIO())
        assert exc.value.code == 1
        assert 'Input ended with an open group' in caplog.text

    def test_usage(self):
        with pytest.raises(SystemExit) as exc:
            bai2dump.main([])
        assert exc.value.code == 2
