# -*- coding: utf-8 -*-
from setuptools import setup

package_dir = \
{'': 'python'}

packages = \
['jsonptr',
 'jsonptr.client',
 'jsonptr.client.commands',
 'jsonptr.pointer',
 'jsonptr.utils']

install_requires = \
['pyyaml', 'typing-extensions']

extras_require = \
{'test': ['pytest']}

entry_points = \
{'console_scripts': ['jsonptr = jsonptr.client.main:main']}

setup_kwargs = {
    'name': 'jsonptr',
    'version': '1.0.0',
    'description': 'JSON Pointer (RFC 6901) resolution and typed references for trees of JSON values',
    'long_description': "# jsonptr\n\nJSON Pointer ([RFC 6901](https://www.rfc-editor.org/rfc/rfc6901)) for trees of plain Python values, as produced by `json.loads()` or `yaml.safe_load()`.\n\n- `JSONPointer` parses, renders, escapes and derives pointers, and converts them to URI fragments and back.\n- `find()`, `find_or_none()` and `exists_in()` resolve a pointer against a document.\n- `JSONRef` binds a pointer to a document and checks the type of every node it navigates to.\n- `JSONReference` is the untyped variant that tolerates pointers not resolving in the document.\n- `jsonptr` command-line utility resolves pointers in JSON and YAML files.\n",
    'long_description_content_type': 'text/markdown',
    'package_dir': package_dir,
    'packages': packages,
    'install_requires': install_requires,
    'extras_require': extras_require,
    'entry_points': entry_points,
    'python_requires': '>=3.8,<4.0',
}

setup(**setup_kwargs)
