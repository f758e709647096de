import json
from datetime import datetime
from typing import Any, Dict, List, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, Field, model_validator


class DecodeError(RuntimeError):
    pass


class ValidationError(RuntimeError):
    pass


class Message(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    # null decodes to the field default
    @model_validator(mode='before')
    @classmethod
    def drop_nulls(cls, data):
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class ExecutionTrigger(Message):
    trigger_type: str = Field('', alias='trigger-type')
    trigger_detail: str = Field('', alias='trigger-detail')


class Detail(Message):
    pipeline: str = ''
    execution_id: str = Field('', alias='execution-id')
    execution_trigger: ExecutionTrigger = Field(default_factory=ExecutionTrigger, alias='execution-trigger')
    state: str = ''


class Envelope(Message):
    account: str = ''
    detail_type: str = Field('', alias='detailType')
    region: str = ''
    source: str = ''
    time: Optional[datetime] = None
    notification_rule_arn: str = Field('', alias='notificationRuleArn')
    detail: Detail = Field(default_factory=Detail)
    resources: List[str] = Field(default_factory=list)
    additional_attributes: Dict[str, Any] = Field(default_factory=dict, alias='additionalAttributes')


REQUIRED = (('state', 'state'), ('pipeline', 'pipeline'), ('execution_id', 'execution-id'))


class Event:
    """
    A CodePipeline execution state change, as delivered in the
    message of an SNS record.
    """

    def __init__(self, message):
        try:
            data = json.loads(message)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"failed to unmarshal SNS message: {e}")

        try:
            self.envelope = Envelope.model_validate(data)
        except pydantic.ValidationError as e:
            raise DecodeError(f"unexpected SNS message shape: {e}")


    @classmethod
    def from_record(cls, record):
        try:
            message = record['Sns']['Message']
        except (KeyError, TypeError):
            raise DecodeError("SNS record carries no message")

        return cls(message)


    def validate(self):
        missing = [name for attr, name in REQUIRED if not getattr(self, attr)]
        if missing:
            raise ValidationError(
                    f"missing required data in SNS message: {', '.join(missing)}")

        return self


    @property
    def detail(self):
        return self.envelope.detail


    @property
    def account(self):
        return self.envelope.account


    @property
    def detail_type(self):
        return self.envelope.detail_type


    @property
    def region(self):
        return self.envelope.region


    @property
    def source(self):
        return self.envelope.source


    @property
    def time(self):
        return self.envelope.time


    @property
    def notification_rule_arn(self):
        return self.envelope.notification_rule_arn


    @property
    def resources(self):
        return self.envelope.resources


    @property
    def attributes(self):
        return self.envelope.additional_attributes


    @property
    def pipeline(self):
        return self.detail.pipeline


    @property
    def execution_id(self):
        return self.detail.execution_id


    @property
    def state(self):
        return self.detail.state


    @property
    def trigger_type(self):
        return self.detail.execution_trigger.trigger_type


    @property
    def trigger_detail(self):
        return self.detail.execution_trigger.trigger_detail
