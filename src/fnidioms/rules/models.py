from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingRules(BaseModel):
    level: LogLevel = "INFO"

class MailerRules(BaseModel):
    sink: Literal["console", "dev"] = "console"
    log_level: LogLevel = "INFO"
    log_body: bool = True
    body_preview_length: int = Field(default=100, ge=0)

class ConverterRules(BaseModel):
    precision: int = Field(default=2, ge=0, le=12)

class Rules(BaseModel):
    logging: LoggingRules = Field(default_factory=LoggingRules)
    mailer: MailerRules = Field(default_factory=MailerRules)
    converters: ConverterRules = Field(default_factory=ConverterRules)

    model_config = ConfigDict(extra="forbid")
