"""Segment elements: linear, quadratic, cubic and Hermite."""