"""
Description:
This module contains precompiled regex patterns for pulling JSON payloads and
question lines out of language model replies.

Dependencies:
- re: Python's built-in regular expression module for pattern matching.

Author: @kcaparas1630

"""

import re

# Compile regex patterns once for better performance
REGEX_PATTERNS = {
    'json_array': re.compile(r"\[[\s\S]*\]"),
    'json_object': re.compile(r"\{[\s\S]*\}"),
    'numbered_prefix': re.compile(r"^\d+\.\s*"),
    'think_block': re.compile(r"<think>.*?</think>", re.DOTALL | re.IGNORECASE)
}
