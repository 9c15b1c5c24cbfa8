"""Test suite for seqclass.

Unit tests live under unit/, grouped by domain (bundle, config,
tokenizer, decoder, engine, errors, cli). Shared bundle builders and fakes
live in the helpers/ subpackage.
"""
