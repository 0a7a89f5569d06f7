
from __future__ import annotations

import os
from argparse import ArgumentParser
from tempfile import NamedTemporaryFile
from unittest import TestCase
from unittest.mock import patch

from socketaddress.address import Address
from socketaddress.config import ConfigError, ParseConfig


class _CustomAddress(Address):
    pass


class TestParseConfig(TestCase):

    def _parse(self, *argv: str) -> ParseConfig:
        parser = ArgumentParser()
        ParseConfig.add_arguments(parser)
        args = parser.parse_args(list(argv))
        return ParseConfig.from_args(args)

    def test_addresses_required(self) -> None:
        self.assertRaises(ConfigError, ParseConfig, addresses=[])

    @patch.dict(os.environ, {}, clear=True)
    def test_from_args(self) -> None:
        config = self._parse('localhost:80', '[::1]:22', '--fail-fast')
        self.assertEqual(['localhost:80', '[::1]:22'], config.addresses)
        self.assertTrue(config.fail_fast)

    @patch.dict(os.environ, {}, clear=True)
    def test_from_args_empty(self) -> None:
        self.assertRaises(ConfigError, self._parse)

    @patch.dict(os.environ, {'SOCKET_ADDRESS_ADDRESSES': 'a:1,b:2'},
                clear=True)
    def test_env(self) -> None:
        config = self._parse()
        self.assertEqual(['a:1', 'b:2'], config.addresses)
        self.assertFalse(config.fail_fast)

    @patch.dict(os.environ, {'SOCKET_ADDRESS_ADDRESSES': 'a:1,b:2'},
                clear=True)
    def test_args_override_env(self) -> None:
        config = self._parse('c:3')
        self.assertEqual(['c:3'], config.addresses)

    def test_env_file(self) -> None:
        with NamedTemporaryFile('w', suffix='.txt') as env_file:
            env_file.write('a:1\n[::1]:2\n\n')
            env_file.flush()
            env = {'SOCKET_ADDRESS_ADDRESSES_FILE': env_file.name}
            with patch.dict(os.environ, env, clear=True):
                config = self._parse()
        self.assertEqual(['a:1', '[::1]:2'], config.addresses)

    @patch.dict(os.environ, {'SOCKET_ADDRESS_ADDRESSES_FILE': '/nonexistent'},
                clear=True)
    def test_env_file_missing(self) -> None:
        self.assertRaises(ConfigError, self._parse)

    def test_overrides(self) -> None:
        parser = ArgumentParser()
        ParseConfig.add_arguments(parser, prefix='--sa-')
        args = parser.parse_args(['h:1', '--sa-fail-fast'])
        config = ParseConfig.from_args(args, address_type=_CustomAddress,
                                       fail_fast=False)
        self.assertFalse(config.fail_fast)
        self.assertIsInstance(config.address_parser.parse('h:1'),
                              _CustomAddress)

    @patch.dict(os.environ, {}, clear=True)
    def test_output_format(self) -> None:
        self.assertEqual('text', self._parse('h:1').output_format)
        self.assertEqual('json',
                         self._parse('h:1', '--format', 'json').output_format)

    def test_output_format_invalid(self) -> None:
        self.assertRaises(ConfigError, ParseConfig, addresses=['h:1'],
                          output_format='xml')
