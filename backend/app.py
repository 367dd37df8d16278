import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from compliance import ComplianceEngine, ComplianceResult, LaborLawRules, Violation
from compliance.report import sort_violations, violations_dataframe, weekly_hours_dataframe
from config import LOG_LEVEL, cors_origins, get_default_rules, validate_rules_config
from schemas import (
    LaborLawRulesSchema,
    PublishCheckResponse,
    ValidateShiftsRequest,
    ValidateShiftsResponse,
    ViolationSchema,
)
from utils.log import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(LOG_LEVEL)
    validate_rules_config(get_default_rules())
    yield


app = FastAPI(title="shiftCompliance", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def resolve_rules(overrides: LaborLawRulesSchema | None) -> LaborLawRules:
    rules = get_default_rules()
    if overrides is not None:
        rules = overrides.apply(rules)
    return rules


def to_violation_schemas(violations: list[Violation]) -> list[ViolationSchema]:
    return [ViolationSchema(**v.to_dict()) for v in sort_violations(violations)]


def to_response(result: ComplianceResult) -> ValidateShiftsResponse:
    if result.violations:
        logging.debug(f"\n{violations_dataframe(result.violations)}")
    if result.weekly_hours:
        logging.debug(f"\n{weekly_hours_dataframe(result)}")

    return ValidateShiftsResponse(
        violations=to_violation_schemas(result.violations),
        error_count=result.error_count,
        warning_count=result.warning_count,
        is_compliant=result.is_compliant,
        can_publish=result.can_publish,
        weekly_hours=result.weekly_hours,
    )


@app.get("/compliance/rules")
async def get_compliance_rules():
    """Get the configured labor law thresholds."""
    return get_default_rules().to_dict()


@app.post("/compliance/validate", response_model=ValidateShiftsResponse)
async def validate_shifts(request: ValidateShiftsRequest) -> ValidateShiftsResponse:
    """Validate every assigned employee in a set of shifts."""
    engine = ComplianceEngine(resolve_rules(request.rules))
    result = engine.check([s.to_shift() for s in request.shifts])
    return to_response(result)


@app.post("/compliance/validate/{employee_id}", response_model=ValidateShiftsResponse)
async def validate_employee_shifts(employee_id: str, request: ValidateShiftsRequest) -> ValidateShiftsResponse:
    """Validate the shifts of a single employee."""
    engine = ComplianceEngine(resolve_rules(request.rules))
    result = engine.check_employee([s.to_shift() for s in request.shifts], employee_id)
    return to_response(result)


@app.post("/compliance/publish-check", response_model=PublishCheckResponse)
async def publish_check(request: ValidateShiftsRequest) -> PublishCheckResponse:
    """Go/no-go gate for publishing a draft schedule."""
    engine = ComplianceEngine(resolve_rules(request.rules))
    result = engine.check([s.to_shift() for s in request.shifts])
    violations = to_violation_schemas(result.violations)

    if not result.can_publish:
        logging.warning(f"Publish refused: {result.error_count} labor law errors")
        raise HTTPException(
            status_code=409,
            detail={
                "message": "Cannot publish a schedule with labor law violations",
                "violations": [v.model_dump() for v in violations if v.severity == "error"],
            },
        )

    return PublishCheckResponse(can_publish=True, warnings=violations)
