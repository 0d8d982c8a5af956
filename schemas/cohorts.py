from pydantic import BaseModel, ConfigDict


# ==========================================================
# [기수] academic_cohorts
# ==========================================================
class AcademicCohortCreate(BaseModel):
    cohort_name: str                  # 기수 이름
    start_year: int                   # 입학 연도


class AcademicCohortUpdate(AcademicCohortCreate):
    pass


class AcademicCohort(AcademicCohortCreate):
    cohort_id: int

    model_config = ConfigDict(from_attributes=True)


# ==========================================================
# [교육 과정] training_programs
# ==========================================================
class TrainingProgramCreate(BaseModel):
    program_name: str                 # 과정 이름


class TrainingProgramUpdate(TrainingProgramCreate):
    pass


class TrainingProgram(TrainingProgramCreate):
    program_id: int

    model_config = ConfigDict(from_attributes=True)
