"""Core pipeline: tokens, classification, context, errors, and the Report.

WHY: The core package holds the stable heart of the parser: the data
structures every decoder shares and the pipeline that drives them.

HOW: tokenizer.py splits the raw text, classifier.py sorts tokens into
groups, context.py carries the month and rollover policy, errors.py
accumulates messages, report.py defines the result, and assembler.py
runs the whole sequence.

RULES:
- Report dataclasses are the contract; change with care
- Classification is shape-based; value validation belongs to decoders
- Nothing in core keeps state between parses
"""
