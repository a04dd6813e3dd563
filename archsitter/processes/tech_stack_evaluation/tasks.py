"""Task definitions for the technology stack evaluation process."""

from pathlib import Path

from archsitter.runtime.task import define_task

from .models import (
    CandidateIdentification,
    CandidateResearch,
    EvaluationCriteria,
    FinalRecommendation,
    OnboardingPlan,
    PocResult,
    RequirementsDefinition,
    RiskAssessment,
    ScoringComparison,
    TechnologyAdr,
)

PROMPTS = Path(__file__).parent / "prompts.yaml"

define_requirements_task = define_task(
    "define-requirements",
    title="Phase 1: Define Requirements - {projectName}",
    agent="general-purpose",
    output_model=RequirementsDefinition,
    labels=["software-architecture", "tech-stack-evaluation", "requirements"],
    prompt_source=PROMPTS,
)

identify_candidates_task = define_task(
    "identify-candidates",
    title="Phase 2: Identify Candidates - {technologyCategory}",
    agent="general-purpose",
    output_model=CandidateIdentification,
    labels=["software-architecture", "tech-stack-evaluation", "candidate-identification"],
    prompt_source=PROMPTS,
)

define_evaluation_criteria_task = define_task(
    "define-evaluation-criteria",
    title="Phase 3: Define Evaluation Criteria - {technologyCategory}",
    agent="general-purpose",
    output_model=EvaluationCriteria,
    labels=["software-architecture", "tech-stack-evaluation", "evaluation-criteria"],
    prompt_source=PROMPTS,
)

research_candidate_task = define_task(
    "research-candidate",
    title="Phase 4.{candidateIndex}: Research Candidate - {candidate[name]}",
    agent="general-purpose",
    output_model=CandidateResearch,
    labels=[
        "software-architecture",
        "tech-stack-evaluation",
        "research",
        "candidate-{candidateIndex}",
    ],
    prompt_source=PROMPTS,
)

build_poc_task = define_task(
    "build-poc",
    title="Phase 5.{candidateIndex}: Build PoC - {candidate[name]}",
    agent="general-purpose",
    output_model=PocResult,
    labels=["software-architecture", "tech-stack-evaluation", "poc", "candidate-{candidateIndex}"],
    prompt_source=PROMPTS,
)

score_and_compare_task = define_task(
    "score-and-compare",
    title="Phase 6: Score and Compare - {technologyCategory}",
    agent="general-purpose",
    output_model=ScoringComparison,
    labels=["software-architecture", "tech-stack-evaluation", "scoring", "comparison"],
    prompt_source=PROMPTS,
)

assess_risks_task = define_task(
    "assess-risks",
    title="Phase 7: Assess Risks - {technologyCategory}",
    agent="general-purpose",
    output_model=RiskAssessment,
    labels=["software-architecture", "tech-stack-evaluation", "risk-assessment"],
    prompt_source=PROMPTS,
)

make_recommendation_task = define_task(
    "make-recommendation",
    title="Phase 8: Make Final Recommendation - {technologyCategory}",
    agent="general-purpose",
    output_model=FinalRecommendation,
    labels=["software-architecture", "tech-stack-evaluation", "recommendation"],
    prompt_source=PROMPTS,
)

create_adr_task = define_task(
    "create-adr",
    title="Phase 9: Create ADR - {technologyCategory}",
    agent="general-purpose",
    output_model=TechnologyAdr,
    labels=["software-architecture", "tech-stack-evaluation", "adr", "documentation"],
    prompt_source=PROMPTS,
)

create_onboarding_plan_task = define_task(
    "create-onboarding-plan",
    title="Phase 10: Create Onboarding Plan - {recommendation[selectedTechnology]}",
    agent="general-purpose",
    output_model=OnboardingPlan,
    labels=["software-architecture", "tech-stack-evaluation", "onboarding", "training"],
    prompt_source=PROMPTS,
)

TASKS = [
    define_requirements_task,
    identify_candidates_task,
    define_evaluation_criteria_task,
    research_candidate_task,
    build_poc_task,
    score_and_compare_task,
    assess_risks_task,
    make_recommendation_task,
    create_adr_task,
    create_onboarding_plan_task,
]
