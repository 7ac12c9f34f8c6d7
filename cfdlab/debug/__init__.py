"""Timers and printing helpers for debugging."""