import json

import pytest

from fasta_pipeline.exceptions import UnsupportedFormatError
from fasta_pipeline.pipeline import run_pipeline


def test_pipeline_without_export(multi_fasta):
    result = run_pipeline([multi_fasta, ">extra\nGC\n"])
    assert [r.name for r in result["records"]][-1] == "extra"
    assert result["summary"]["count"] == 5
    assert result["export"] is None


def test_pipeline_with_json_export(multi_fasta):
    result = run_pipeline([multi_fasta], "json")
    assert len(json.loads(result["export"])) == 4


def test_pipeline_rejects_unknown_format(multi_fasta):
    with pytest.raises(UnsupportedFormatError):
        run_pipeline([multi_fasta], "xlsx")
