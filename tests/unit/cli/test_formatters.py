import json

import yaml

from pattern_demos.cli.formatters import format_output

DATA = {
    "demos": [
        {"name": "observer", "title": "Observer", "category": "behavioral", "summary": "Notify"},
        {"name": "proxy", "title": "Proxy", "category": "structural", "summary": "Guard"},
    ]
}


def test_json_output_round_trips():
    assert json.loads(format_output(DATA, "json")) == DATA


def test_yaml_output_round_trips():
    assert yaml.safe_load(format_output(DATA, "yaml")) == DATA


def test_table_output_lists_each_demo():
    output = format_output(DATA, "table")

    assert "Name" in output
    assert "observer" in output
    assert "structural" in output


def test_list_output_has_one_block_per_demo():
    output = format_output(DATA, "list")

    blocks = output.split("\n\n")
    assert len(blocks) == 2
    assert blocks[0].startswith("Name:     observer")


def test_empty_demo_list():
    assert format_output({"demos": []}, "table") == "No demos found."
    assert format_output({"demos": []}, "list") == "No demos found."


def test_unknown_structure_falls_back_to_json():
    data = {"other": 1}
    assert json.loads(format_output(data, "table")) == data
    assert json.loads(format_output(data, "unknown")) == data
