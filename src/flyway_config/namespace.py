# MIT License
#
# Copyright (c) 2025 Democratize Technology
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Extraction of prefix namespaces from a flat property mapping."""

from collections.abc import Mapping


def extract_namespace(
    properties: Mapping[str, str],
    prefix: str,
    current: Mapping[str, str] | None = None,
) -> tuple[dict[str, str], dict[str, str]]:
    """Partition ``properties`` into the ``prefix`` namespace and the remainder.

    Every key that starts with ``prefix`` and has at least one character after
    it is moved into the extracted mapping with the prefix stripped. The
    extracted mapping is seeded with ``current`` so repeated extractions are
    cumulative; extracted entries win over seeded ones with the same name.

    Args:
        properties: Flat property mapping. Not modified.
        prefix: Namespace prefix, including its trailing dot.
        current: Entries already configured for this namespace.

    Returns:
        Tuple of (extracted namespace, remaining properties)
    """
    extracted: dict[str, str] = dict(current or {})
    remaining: dict[str, str] = {}

    for key, value in properties.items():
        if key.startswith(prefix) and len(key) > len(prefix):
            extracted[key[len(prefix) :]] = value
        else:
            remaining[key] = value

    return extracted, remaining
