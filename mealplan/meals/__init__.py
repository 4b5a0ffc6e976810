# -*- coding: utf-8 -*-
"""Meals domain: prompt rendering, completion retries and record parsing."""
