"""Vectors, rectangles, ranges, limits, fractions and numeric helpers."""