"""Tests for configuration, structured logging and the centroid service."""

import json
import logging
import math

import pytest

from meridian_geometry import LineString, Point, Polygon
from meridian_centroid import (
    CentroidConfig,
    CentroidService,
    DegenerateGeometryError,
    InvalidGeometryError,
    UnsupportedFeatureError,
)
from meridian_centroid.logging import LogEvent, StructuredLogger, create_logger


def entries(caplog, logger_name):
    """Decoded JSON log entries emitted by one logger."""
    return [json.loads(r.getMessage()) for r in caplog.records if r.name == logger_name]


class TestCentroidConfig:
    """Tests for CentroidConfig."""

    def test_defaults(self):
        config = CentroidConfig()
        assert config.strict is True
        assert config.log_level == "WARNING"
        assert config.level == logging.WARNING
        assert config.component == "centroid"

    def test_log_level_normalized(self):
        assert CentroidConfig(log_level="debug").level == logging.DEBUG

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="Invalid log_level"):
            CentroidConfig(log_level="LOUD")

    def test_strict_must_be_bool(self):
        with pytest.raises(ValueError, match="strict"):
            CentroidConfig(strict="yes")

    def test_empty_component(self):
        with pytest.raises(ValueError, match="component"):
            CentroidConfig(component="")

    def test_from_dict_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown config keys"):
            CentroidConfig.from_dict({"strict": True, "unit": "km"})

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "centroid.yaml"
        path.write_text("strict: false\nlog_level: INFO\ncomponent: yaml\n")
        config = CentroidConfig.from_yaml(path)
        assert config == CentroidConfig(strict=False, log_level="INFO", component="yaml")

    def test_from_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert CentroidConfig.from_yaml(path) == CentroidConfig()

    def test_from_yaml_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- strict\n- true\n")
        with pytest.raises(ValueError, match="mapping"):
            CentroidConfig.from_yaml(path)


class TestStructuredLogger:
    """Tests for StructuredLogger."""

    def test_entry_format(self, caplog):
        logger = StructuredLogger("fmt", level=logging.DEBUG)
        logger.info(
            event=LogEvent.CENTROID_LINE_COMPUTED,
            message="done",
            metadata={'vertices': 4}
        )
        (entry,) = entries(caplog, "meridian.fmt")
        assert entry['level'] == "INFO"
        assert entry['component'] == "fmt"
        assert entry['event'] == "centroid.line.computed"
        assert entry['metadata'] == {'vertices': 4}
        assert 'timestamp' in entry

    def test_level_filtering(self, caplog):
        logger = create_logger("quiet", level=logging.WARNING)
        logger.debug(event=LogEvent.CENTROID_POINT_COMPUTED, message="hidden")
        logger.warning(event=LogEvent.CENTROID_POINT_COMPUTED, message="shown")
        assert [e['message'] for e in entries(caplog, "meridian.quiet")] == ["shown"]

    def test_error_includes_exception(self, caplog):
        logger = create_logger("errs")
        logger.error(
            event=LogEvent.INVALID_GEOMETRY_ERROR,
            message="bad ring",
            exc_info=InvalidGeometryError("Ring is not closed")
        )
        (entry,) = entries(caplog, "meridian.errs")
        assert entry['exception'] == {
            'type': 'InvalidGeometryError',
            'message': 'Ring is not closed',
        }

    def test_non_finite_metadata_written_as_null(self, caplog):
        logger = create_logger("nan")
        logger.warning(
            event=LogEvent.CENTROID_NON_FINITE,
            message="undefined",
            metadata={'centroid': [math.nan, math.inf], 'nested': {'x': -math.inf}}
        )
        (record,) = [r for r in caplog.records if r.name == "meridian.nan"]
        assert "NaN" not in record.getMessage()
        assert "Infinity" not in record.getMessage()
        entry = json.loads(record.getMessage())
        assert entry['metadata'] == {'centroid': [None, None], 'nested': {'x': None}}


class TestCentroidService:
    """Tests for CentroidService."""

    def test_polygon_logged(self, debug_service, square, caplog):
        result = debug_service.polygon(square)
        assert result.to_tuple() == pytest.approx((1.0, 1.0))

        (entry,) = entries(caplog, "meridian.test")
        assert entry['level'] == "DEBUG"
        assert entry['event'] == LogEvent.CENTROID_POLYGON_COMPUTED.value
        assert entry['metadata']['vertices'] == 5
        assert entry['metadata']['centroid'] == pytest.approx([1.0, 1.0])

    def test_line_logged(self, debug_service, zigzag_line, caplog):
        result = debug_service.line(zigzag_line)
        assert result.x == pytest.approx(0.5, abs=1e-7)

        (entry,) = entries(caplog, "meridian.test")
        assert entry['event'] == LogEvent.CENTROID_LINE_COMPUTED.value
        assert entry['metadata']['feature'] == "LineString"

    def test_dispatch_point(self, debug_service, caplog):
        assert debug_service.centroid(Point(1, 2)) == Point(1, 2)
        (entry,) = entries(caplog, "meridian.test")
        assert entry['event'] == LogEvent.CENTROID_POINT_COMPUTED.value

    def test_degenerate_logged_and_raised(self, debug_service, caplog):
        collinear = Polygon.from_ring([(0, 0), (1, 1), (2, 2), (0, 0)])
        with pytest.raises(DegenerateGeometryError):
            debug_service.polygon(collinear)

        (entry,) = entries(caplog, "meridian.test")
        assert entry['level'] == "ERROR"
        assert entry['event'] == LogEvent.DEGENERATE_GEOMETRY_ERROR.value
        assert entry['exception']['type'] == "DegenerateGeometryError"

    def test_invalid_logged_and_raised(self, debug_service, caplog):
        with pytest.raises(InvalidGeometryError):
            debug_service.line(LineString([(0, 0)]))

        (entry,) = entries(caplog, "meridian.test")
        assert entry['event'] == LogEvent.INVALID_GEOMETRY_ERROR.value

    def test_unsupported_logged_and_raised(self, debug_service, caplog):
        with pytest.raises(UnsupportedFeatureError):
            debug_service.centroid({"type": "Polygon"})

        (entry,) = entries(caplog, "meridian.test")
        assert entry['event'] == LogEvent.UNSUPPORTED_FEATURE_ERROR.value
        assert entry['metadata']['feature'] == "dict"

    def test_legacy_mode_returns_non_finite(self, legacy_service, caplog):
        collinear = Polygon.from_ring([(0, 0), (1, 1), (2, 2), (0, 0)])
        result = legacy_service.polygon(collinear)
        assert math.isnan(result.x) and math.isnan(result.y)

        (record,) = [r for r in caplog.records if r.name == "meridian.legacy"]
        assert record.levelname == "WARNING"
        entry = json.loads(record.getMessage())
        assert entry['event'] == LogEvent.CENTROID_NON_FINITE.value
        assert entry['metadata']['centroid'] == [None, None]

    def test_default_logger_from_config(self):
        service = CentroidService(CentroidConfig(component="defaults", log_level="ERROR"))
        assert service.logger.logger_name == "meridian.defaults"
        assert service.logger.logger.level == logging.ERROR

    def test_from_yaml(self, tmp_path, caplog):
        path = tmp_path / "service.yaml"
        path.write_text("strict: true\nlog_level: INFO\ncomponent: yamlsvc\n")
        service = CentroidService.from_yaml(path)

        assert service.config.strict is True
        (entry,) = entries(caplog, "meridian.yamlsvc")
        assert entry['event'] == LogEvent.CONFIG_LOADED.value
        assert entry['metadata']['path'] == str(path)
