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

"""JSON dump of a bai2.model.File.

Model objects become dicts with a '__class__' key, type codes are
namedtuples and are written as plain objects by simplejson.
"""

import simplejson

from bai2 import model


class JSONEncoder(simplejson.JSONEncoder):

    def default(self, obj):
        if isinstance(obj, (model.BaiDate, model.BaiDateTime,
                            model.BaiEndOfDay)):
            return {'__class__': obj.__class__.__name__, 'value': str(obj)}
        elif isinstance(obj, model.Value):
            dic = dict(vars(obj))
            dic['__class__'] = obj.__class__.__name__
            if isinstance(obj, model.FundsType):
                dic['qualifier'] = obj.qualifier
            return dic
        return super(JSONEncoder, self).default(obj)


def dumps(obj, **kw):
    kw.setdefault('cls', JSONEncoder)
    return simplejson.dumps(obj, **kw)
