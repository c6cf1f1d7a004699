#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import sys

from yt_scraper.cli import main

# ===================== Execução direta =====================
if __name__ == "__main__":
    # ↳ configure via env: YOUTUBE_API_KEY, YOUTUBE_CHANNEL_ID, DATABASE_URL
    sys.exit(main())
