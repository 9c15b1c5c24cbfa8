"""Unit tests for config.json -> ModelConfig parsing."""

from __future__ import annotations

import dataclasses
import json

import pytest

from seqclass.classifier.config import CLASSIFIER_KEYS, load_model_config, parse_model_config
from seqclass.config import ARCHITECTURE_HYPERPARAMETERS, REQUIRED_HYPERPARAMETERS
from seqclass.errors import ConfigParseError
from seqclass.state import ClassifierPooling
from tests.helpers.bundle import TINY_CONFIG, tiny_bert_config, tiny_config


def test_parse_keeps_hyperparameters_exactly_as_declared() -> None:
    config = parse_model_config(TINY_CONFIG)

    expected = {k: v for k, v in TINY_CONFIG.items() if k not in CLASSIFIER_KEYS}
    assert dict(config.hyperparameters) == expected
    assert config.model_type == "modernbert"
    assert config.pad_token_id == 0


def test_parse_reads_classifier_section() -> None:
    config = parse_model_config(TINY_CONFIG)

    assert config.classifier is not None
    assert config.id_to_label == {"0": "benign", "1": "toxic"}
    # integer label2id values are normalized to strings
    assert dict(config.classifier.label_to_id) == {"benign": "0", "toxic": "1"}
    assert config.pooling_strategy is ClassifierPooling.MEAN


def test_parse_reads_cls_pooling() -> None:
    config = parse_model_config(tiny_config(classifier_pooling="cls"))

    assert config.pooling_strategy is ClassifierPooling.CLS


def test_unrecognized_pooling_falls_back_to_unknown() -> None:
    config = parse_model_config(tiny_config(classifier_pooling="max-of-attention"))

    assert config.pooling_strategy is ClassifierPooling.UNKNOWN
    assert config.id_to_label == {"0": "benign", "1": "toxic"}


def test_absent_pooling_defaults_to_unknown() -> None:
    config = parse_model_config(tiny_config(classifier_pooling=None))

    assert config.pooling_strategy is ClassifierPooling.UNKNOWN


def test_missing_classifier_section_yields_empty_mappings() -> None:
    config = parse_model_config(
        tiny_config(id2label=None, label2id=None, classifier_pooling=None)
    )

    assert config.classifier is None
    assert config.id_to_label == {}
    assert config.pooling_strategy is ClassifierPooling.UNKNOWN


def test_label2id_is_derived_when_absent() -> None:
    config = parse_model_config(tiny_config(label2id=None))

    assert config.classifier is not None
    assert dict(config.classifier.label_to_id) == {"benign": "0", "toxic": "1"}


@pytest.mark.parametrize(
    "field_name", REQUIRED_HYPERPARAMETERS + ARCHITECTURE_HYPERPARAMETERS["modernbert"]
)
def test_missing_required_hyperparameter_is_parse_error(field_name: str) -> None:
    with pytest.raises(ConfigParseError) as exc_info:
        parse_model_config(tiny_config(**{field_name: None}))

    assert exc_info.value.missing == (field_name,)
    assert field_name in str(exc_info.value)


def test_bert_config_does_not_need_modernbert_fields() -> None:
    config = parse_model_config(tiny_bert_config())

    assert config.model_type == "bert"
    assert config.id_to_label == {"0": "negative", "1": "neutral", "2": "positive"}
    assert "local_attention" not in config.hyperparameters


@pytest.mark.parametrize("field_name", REQUIRED_HYPERPARAMETERS)
def test_bert_config_still_needs_common_fields(field_name: str) -> None:
    with pytest.raises(ConfigParseError) as exc_info:
        parse_model_config(tiny_bert_config(**{field_name: None}))

    assert exc_info.value.missing == (field_name,)


def test_absent_model_type_requires_modernbert_fields() -> None:
    with pytest.raises(ConfigParseError) as exc_info:
        parse_model_config(tiny_config(model_type=None, local_attention=None))

    assert exc_info.value.missing == ("local_attention",)


def test_null_required_hyperparameter_is_parse_error() -> None:
    document = tiny_config()
    document["hidden_size"] = None

    with pytest.raises(ConfigParseError) as exc_info:
        parse_model_config(document)

    assert exc_info.value.missing == ("hidden_size",)


@pytest.mark.parametrize("pad_token_id", [-1, "0", 1.5, True])
def test_invalid_pad_token_id_is_parse_error(pad_token_id) -> None:
    with pytest.raises(ConfigParseError, match="pad_token_id"):
        parse_model_config(tiny_config(pad_token_id=pad_token_id))


def test_non_object_id2label_is_parse_error() -> None:
    with pytest.raises(ConfigParseError, match="id2label"):
        parse_model_config(tiny_config(id2label=["benign", "toxic"]))


def test_nested_label_value_is_parse_error() -> None:
    with pytest.raises(ConfigParseError, match="id2label"):
        parse_model_config(tiny_config(id2label={"0": {"name": "benign"}}))


def test_model_config_is_immutable() -> None:
    config = parse_model_config(TINY_CONFIG)

    with pytest.raises(TypeError):
        config.hyperparameters["hidden_size"] = 1  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.classifier = None  # type: ignore[misc]


def test_id_to_label_returns_a_copy() -> None:
    config = parse_model_config(TINY_CONFIG)

    labels = config.id_to_label
    labels["2"] = "other"

    assert config.id_to_label == {"0": "benign", "1": "toxic"}


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("cls", ClassifierPooling.CLS),
        ("CLS", ClassifierPooling.CLS),
        (" mean ", ClassifierPooling.MEAN),
        ("unknown", ClassifierPooling.UNKNOWN),
        ("attention", ClassifierPooling.UNKNOWN),
        (None, ClassifierPooling.UNKNOWN),
        (1, ClassifierPooling.UNKNOWN),
    ],
)
def test_classifier_pooling_parse(raw, expected) -> None:
    assert ClassifierPooling.parse(raw) is expected


def test_load_model_config_reads_file(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(TINY_CONFIG), encoding="utf-8")

    config = load_model_config(path)

    assert config.id_to_label == {"0": "benign", "1": "toxic"}


def test_load_model_config_reports_path_on_missing_field(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(tiny_config(vocab_size=None)), encoding="utf-8")

    with pytest.raises(ConfigParseError) as exc_info:
        load_model_config(path)

    assert exc_info.value.path == path
