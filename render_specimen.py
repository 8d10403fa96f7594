#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Render a glyph strip or a specimen grid from a font file.
"""

import sys

import glyph_specimen.cli


if __name__ == "__main__":
	sys.exit(glyph_specimen.cli.main())
