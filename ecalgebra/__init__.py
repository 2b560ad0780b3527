#!/usr/bin/env python3

# Copyright (C) 2020-2022 The ecalgebra developers
#
# This file is part of ecalgebra. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecalgebra including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecalgebra package."

name = "ecalgebra"
__version__ = "2022.5.3"
__author__ = "The ecalgebra developers"
__author_email__ = "devs@ecalgebra.org"
__copyright__ = "Copyright (C) 2017-2022 The ecalgebra developers"
__license__ = "MIT License"
