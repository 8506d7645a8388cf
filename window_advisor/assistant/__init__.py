"""
Chat assistant — static keyword lookup, independent of the recommendation engine.

Modules:
  chat — answer_question() and the canned response table.
"""
