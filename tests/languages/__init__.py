# topmark:header:start
#
#   project      : Copywrite
#   file         : __init__.py
#   file_relpath : tests/languages/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end
