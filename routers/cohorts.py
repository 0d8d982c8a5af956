from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from database.db import get_db
from models.academic_cohorts import AcademicCohort as AcademicCohortModel
from models.training_programs import TrainingProgram as TrainingProgramModel
from schemas.cohorts import (
    AcademicCohort, AcademicCohortCreate, AcademicCohortUpdate,
    TrainingProgram, TrainingProgramCreate, TrainingProgramUpdate,
)
from schemas.common import READ_ERROR_RESPONSES, UPDATE_ERROR_RESPONSES, WRITE_ERROR_RESPONSES
from services import crud_service

# 학생 등록 폼의 참조 목록 (기수 / 교육 과정)
router = APIRouter(prefix="/cohorts", tags=["기수 정보"])
program_router = APIRouter(prefix="/programs", tags=["교육 과정"])


# ==========================================================
# [기수] /cohorts
# ==========================================================

@router.get("", response_model=List[AcademicCohort], responses=READ_ERROR_RESPONSES)
def read_cohorts(db: Session = Depends(get_db)):
    return crud_service.list_rows(
        db, AcademicCohortModel, order_by=(AcademicCohortModel.start_year.desc(),), name="cohorts",
    )


@router.post("", response_model=AcademicCohort, status_code=201, responses=WRITE_ERROR_RESPONSES)
def create_cohort(cohort: AcademicCohortCreate, db: Session = Depends(get_db)):
    return crud_service.create_row(db, AcademicCohortModel, cohort.model_dump(), name="cohort")


@router.put("/{cohort_id}", response_model=AcademicCohort, responses=UPDATE_ERROR_RESPONSES)
def update_cohort(cohort_id: int, updated: AcademicCohortUpdate, db: Session = Depends(get_db)):
    return crud_service.update_row(db, AcademicCohortModel, cohort_id, updated.model_dump(), name="cohort")


@router.delete("/{cohort_id}", status_code=204, responses=WRITE_ERROR_RESPONSES)
def delete_cohort(cohort_id: int, db: Session = Depends(get_db)):
    crud_service.delete_row(db, AcademicCohortModel, AcademicCohortModel.cohort_id, cohort_id, name="cohort")
    return Response(status_code=204)


# ==========================================================
# [교육 과정] /programs
# ==========================================================

@program_router.get("", response_model=List[TrainingProgram], responses=READ_ERROR_RESPONSES)
def read_programs(db: Session = Depends(get_db)):
    return crud_service.list_rows(
        db, TrainingProgramModel, order_by=(TrainingProgramModel.program_name,), name="programs",
    )


@program_router.post("", response_model=TrainingProgram, status_code=201, responses=WRITE_ERROR_RESPONSES)
def create_program(program: TrainingProgramCreate, db: Session = Depends(get_db)):
    return crud_service.create_row(db, TrainingProgramModel, program.model_dump(), name="program")


@program_router.put("/{program_id}", response_model=TrainingProgram, responses=UPDATE_ERROR_RESPONSES)
def update_program(program_id: int, updated: TrainingProgramUpdate, db: Session = Depends(get_db)):
    return crud_service.update_row(db, TrainingProgramModel, program_id, updated.model_dump(), name="program")


@program_router.delete("/{program_id}", status_code=204, responses=WRITE_ERROR_RESPONSES)
def delete_program(program_id: int, db: Session = Depends(get_db)):
    crud_service.delete_row(db, TrainingProgramModel, TrainingProgramModel.program_id, program_id, name="program")
    return Response(status_code=204)
