"""
Latin Drill - Timed Latin Vocabulary Drilling

Turns a pool of Latin nouns and a set of exercise types into a continuous,
time-bounded stream of randomized drills, tracking correctness and timing.
"""

__version__ = "1.0.0"
__author__ = "Latin Drill Contributors"
