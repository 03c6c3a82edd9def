"""
통합 테스트
템플릿 치환, 설정, 로깅 구성을 함께 검사합니다.
"""

import json
import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import pytz

from josa import process_template_with_particles, find_unresolved_particles
from josa.config import settings
from josa.config.settings import Config, config
from josa.utils.error_handling import UnsupportedInputTypeError
from josa.utils.logging_config import (
    JSONFormatter, LogCategory, get_logger, log_context, log_manager,
    log_debug, log_info, log_warning, log_error
)


class TestTemplates(unittest.TestCase):
    """템플릿 치환 테스트"""

    def test_basic_particles(self):
        template = "{name}이/가 {item}을/를 샀습니다."
        result = process_template_with_particles(template, {"name": "철수", "item": "사과"})
        self.assertEqual(result, "철수가 사과를 샀습니다.")

        result = process_template_with_particles(template, {"name": "홍길동", "item": "책"})
        self.assertEqual(result, "홍길동이 책을 샀습니다.")

    def test_known_pair_in_either_order(self):
        self.assertEqual(process_template_with_particles("{a}와/과", {"a": "사랑"}), "사랑과")
        self.assertEqual(process_template_with_particles("{a}과/와", {"a": "너"}), "너와")
        self.assertEqual(process_template_with_particles("{a}를/을", {"a": "밥"}), "밥을")

    def test_unknown_pair_reads_consonant_first(self):
        self.assertEqual(process_template_with_particles("{a}으로/로", {"a": "집"}), "집으로")
        self.assertEqual(process_template_with_particles("{a}으로/로", {"a": "학교"}), "학교로")

    def test_particle_followed_by_more_hangul(self):
        self.assertEqual(
            process_template_with_particles("{name}와/과는 친구", {"name": "철수"}),
            "철수와는 친구"
        )
        self.assertEqual(process_template_with_particles("{name}을/를도", {"name": "책"}), "책을도")
        self.assertEqual(process_template_with_particles("{n}이/가요", {"n": "Yuna"}), "Yuna가요")
        self.assertEqual(
            process_template_with_particles("{n}이나/나마", {"n": "홍길동"}), "홍길동이나마"
        )

    def test_unknown_pair_followed_by_more_hangul(self):
        self.assertEqual(process_template_with_particles("{a}으로/로도", {"a": "학교"}), "학교로도")
        self.assertEqual(process_template_with_particles("{a}으로/로도", {"a": "집"}), "집으로도")
        self.assertEqual(
            process_template_with_particles("{a}이에요/예요", {"a": "사과"}), "사과예요"
        )

    def test_plain_placeholder(self):
        self.assertEqual(
            process_template_with_particles("안녕, {name}!", {"name": "Yuna"}),
            "안녕, Yuna!"
        )

    def test_mixed_inputs(self):
        template = "{product}은/는 {count}개가 남았고 {user}아/야 기다려."
        result = process_template_with_particles(
            template, {"product": "아이폰 11", "count": 3, "user": "영희"}
        )
        self.assertEqual(result, "아이폰 11은 3개가 남았고 영희야 기다려.")

    def test_missing_replacement_left_untouched(self):
        template = "{name}이/가 {other}을/를 봤다"
        result = process_template_with_particles(template, {"name": "Juliet"})
        self.assertEqual(result, "Juliet이 {other}을/를 봤다")
        self.assertEqual(find_unresolved_particles(result), ["{other}을/를"])

    def test_unclassifiable_value_drops_particle(self):
        result = process_template_with_particles("{name}이/가 왔다", {"name": "こんにちは"})
        self.assertEqual(result, "こんにちは 왔다")

    def test_markup_values(self):
        template = "{name}이/가 팔로우했습니다"
        value = '<span class="h-card">철수</span>'

        self.assertEqual(
            process_template_with_particles(template, {"name": value}, strip_markup=True),
            f"{value}가 팔로우했습니다"
        )
        # 태그를 걷어내지 않으면 'span'의 'n'으로 판단된다
        self.assertEqual(
            process_template_with_particles(template, {"name": value}, strip_markup=False),
            f"{value}이 팔로우했습니다"
        )

    @patch.object(Config, 'TEMPLATE_STRIP_MARKUP', True)
    def test_markup_default_from_config(self):
        self.assertEqual(
            process_template_with_particles("{n}을/를", {"n": "<b>홍길동</b>"}),
            "<b>홍길동</b>을"
        )

    def test_empty_template(self):
        self.assertEqual(process_template_with_particles("", {"a": "b"}), "")

    def test_unsupported_value_type(self):
        with self.assertRaises(UnsupportedInputTypeError):
            process_template_with_particles("{a}이/가", {"a": 1.5})

    def test_find_unresolved_particles(self):
        self.assertEqual(find_unresolved_particles(""), [])
        self.assertEqual(find_unresolved_particles("철수가 왔다"), [])
        self.assertEqual(
            find_unresolved_particles("{a}이/가 {b}와/과 {c}"),
            ["{a}이/가", "{b}와/과"]
        )
        self.assertEqual(
            find_unresolved_particles("{a}와/과는 {b}으로/로도"),
            ["{a}와/과", "{b}으로/로"]
        )


class TestConfig(unittest.TestCase):
    """설정 테스트"""

    def test_defaults(self):
        self.assertIn(config.get_log_format(), Config.LOG_FORMATS)
        self.assertIsInstance(config.LOG_MAX_BYTES, int)

    def test_parse_env_line(self):
        self.assertEqual(settings._parse_env_line('JOSA_LOG_LEVEL=DEBUG'), ('JOSA_LOG_LEVEL', 'DEBUG'))
        self.assertEqual(settings._parse_env_line('KEY = "quoted value"'), ('KEY', 'quoted value'))
        self.assertEqual(settings._parse_env_line("KEY='x=y'"), ('KEY', 'x=y'))
        self.assertEqual(settings._parse_env_line('# comment'), (None, None))
        self.assertEqual(settings._parse_env_line('no_equals'), (None, None))

    def test_load_env_file_does_not_override(self):
        with tempfile.TemporaryDirectory() as tmp:
            env_path = Path(tmp) / '.env'
            env_path.write_text(
                'JOSA_TEST_NEW=from_file\nJOSA_TEST_EXISTING=from_file\n', encoding='utf-8'
            )
            with patch.dict(os.environ, {'JOSA_TEST_EXISTING': 'from_env'}):
                self.assertTrue(settings._load_env_file(env_path, 'utf-8'))
                self.assertEqual(os.environ['JOSA_TEST_NEW'], 'from_file')
                self.assertEqual(os.environ['JOSA_TEST_EXISTING'], 'from_env')
            self.assertNotIn('JOSA_TEST_NEW', os.environ)

    def test_load_env_file_encoding_fallback(self):
        with tempfile.TemporaryDirectory() as tmp:
            env_path = Path(tmp) / '.env'
            env_path.write_bytes('JOSA_TEST_NAME=홍길동\n'.encode('cp949'))
            with patch.dict(os.environ, {'JOSA_ENV_FILE': str(env_path)}):
                self.assertFalse(settings._load_env_file(env_path, 'utf-8'))
                settings._load_env()
                self.assertEqual(os.environ['JOSA_TEST_NAME'], '홍길동')

    def test_env_int_falls_back_on_bad_value(self):
        with patch.dict(os.environ, {'JOSA_LOG_MAX_BYTES': '10MB', 'JOSA_LOG_BACKUP_COUNT': ''}):
            self.assertEqual(settings._env_int('JOSA_LOG_MAX_BYTES', 10485760), 10485760)
            self.assertEqual(settings._env_int('JOSA_LOG_BACKUP_COUNT', 5), 5)
        with patch.dict(os.environ, {'JOSA_LOG_BACKUP_COUNT': '3'}):
            self.assertEqual(settings._env_int('JOSA_LOG_BACKUP_COUNT', 5), 3)
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop('JOSA_TEST_MISSING_INT', None)
            self.assertEqual(settings._env_int('JOSA_TEST_MISSING_INT', 7), 7)

    @patch.object(Config, 'TIMEZONE', 'Not/AZone')
    def test_invalid_timezone_falls_back_to_utc(self):
        self.assertIs(config.get_timezone(), pytz.utc)

    @patch.object(Config, 'LOG_FORMAT', 'xml')
    def test_unknown_log_format(self):
        self.assertEqual(config.get_log_format(), 'text')

    def test_error_messages(self):
        self.assertIn('조사 타입', config.get_error_message('UNKNOWN_PARTICLE_TYPE'))
        self.assertEqual(
            config.get_error_message('NOPE'), config.get_error_message('UNKNOWN_ERROR')
        )


class TestLogging(unittest.TestCase):
    """로깅 구성 테스트"""

    def tearDown(self):
        log_manager.reconfigure()

    def test_library_logger_is_quiet_by_default(self):
        with patch.object(Config, 'ENABLE_CONSOLE_LOG', False), \
                patch.object(Config, 'LOG_FILE_PATH', ''):
            log_manager.reconfigure()
        self.assertEqual(list(log_manager.handlers), ['null'])
        self.assertIsInstance(log_manager.logger.handlers[0], logging.NullHandler)

    def test_child_loggers(self):
        self.assertEqual(get_logger('templates').name, 'josa.templates')
        self.assertEqual(get_logger('josa.templates').name, 'josa.templates')
        self.assertIs(get_logger(), log_manager.logger)

    def test_json_file_logging(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / 'logs' / 'josa.log'
            with patch.object(Config, 'LOG_FILE_PATH', str(log_path)), \
                    patch.object(Config, 'LOG_FORMAT', 'json'), \
                    patch.object(Config, 'LOG_LEVEL', 'DEBUG'):
                log_manager.reconfigure()
                self.assertIsInstance(log_manager.handlers['file'].formatter, JSONFormatter)

                with log_context("unit", LogCategory.TEMPLATE, size=1):
                    pass
                log_manager.shutdown()

            lines = log_path.read_text(encoding='utf-8').splitlines()
            entries = [json.loads(line) for line in lines]
            self.assertEqual(len(entries), 3)
            self.assertTrue(entries[0]['message'].startswith('로깅 재구성'))
            self.assertEqual(entries[0]['level'], 'INFO')
            self.assertTrue(entries[1]['message'].startswith('시작: unit'))
            self.assertEqual(entries[2]['category'], 'template')
            self.assertTrue(entries[2]['success'])
            log_manager.reconfigure()

    def test_module_level_helpers(self):
        with self.assertLogs('josa', level='DEBUG') as captured:
            log_debug("디버그 메시지")
            log_info("정보 메시지")
            log_warning("경고 메시지")
            log_error("에러 메시지", exc_info=False)
        self.assertEqual(
            [record.levelname for record in captured.records],
            ['DEBUG', 'INFO', 'WARNING', 'ERROR']
        )
        self.assertEqual(captured.records[2].getMessage(), "경고 메시지")

    def test_log_context_reraises(self):
        with self.assertLogs('josa', level='ERROR') as captured:
            with self.assertRaises(RuntimeError):
                with log_context("boom"):
                    raise RuntimeError("fail")
        self.assertIn('실패: boom', captured.output[0])


if __name__ == '__main__':
    unittest.main()
