from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Union


class MedicalTestIntent(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class AddMedicalTest(MedicalTestIntent):
    command: Literal["add"] = "add"
    patient_id: str = Field(min_length=1)
    test_name: str = Field(min_length=1)
    result: str = Field(min_length=1)


class DeleteMedicalTests(MedicalTestIntent):
    command: Literal["del"] = "del"
    patient_id: str = Field(min_length=1)


class ListMedicalTests(MedicalTestIntent):
    command: Literal["list"] = "list"
    patient_id: str = Field(min_length=1)


AnyMedicalTestIntent = Union[AddMedicalTest, DeleteMedicalTests, ListMedicalTests]
