# -*- coding: utf-8 -*-
"""Meal plan backend."""
