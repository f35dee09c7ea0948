# fasta_pipeline/config.py

from pydantic import BaseModel, model_validator

__VERSION__ = "0.1.0"


class ExportConfig(BaseModel):
    json_indent: int = 2
    json_include_stats: bool = True
    csv_line_terminator: str = "\n"

    @model_validator(mode="after")
    def validate_export_options(self) -> "ExportConfig":
        if self.json_indent < 0:
            raise ValueError(f"json_indent must be at least 0, got {self.json_indent}.")
        if self.csv_line_terminator not in ("\n", "\r\n"):
            raise ValueError("csv_line_terminator must be '\\n' or '\\r\\n'.")
        return self
