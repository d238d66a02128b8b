#!/usr/bin/env python3

# Copyright (C) 2022-2024 The eckeys developers
#
# This file is part of eckeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the eckeys package."

name = "eckeys"
__version__ = "2024.10.1"
__author__ = "The eckeys developers"
__author_email__ = "devs@eckeys.org"
__copyright__ = "Copyright (C) 2022-2024 The eckeys developers"
__license__ = "MIT License"
