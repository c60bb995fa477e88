"""Configuration management."""

import os
from pathlib import Path
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config(BaseModel):
    """Application configuration."""

    # Paths
    workspace: Path = Field(
        default_factory=lambda: Path(os.getenv("PVG_WORKSPACE", ".")),
        description="Workspace directory"
    )
    document_file: str = Field(
        default_factory=lambda: os.getenv("PVG_DOCUMENT", "project.json"),
        description="Default scene document file name"
    )

    # Export settings
    json_indent: int = Field(
        default_factory=lambda: int(os.getenv("PVG_JSON_INDENT", "2")),
        description="Indentation used when writing JSON documents"
    )

    class Config:
        """Pydantic config."""
        frozen = False

    @property
    def document_path(self) -> Path:
        """Return the default document path inside the workspace."""
        return self.workspace / self.document_file

    def validate_required(self) -> None:
        """Validate that the configuration is usable.

        Raises:
            ValueError: If the indent is negative.
        """
        if self.json_indent < 0:
            raise ValueError(
                f"PVG_JSON_INDENT must be zero or positive. Got: {self.json_indent}"
            )


# Global config instance
config = Config()
