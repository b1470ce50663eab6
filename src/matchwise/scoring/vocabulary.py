"""Static lookup tables used by the scoring core."""

# Technology and domain terms matched against job title + description.
# Dotted and hyphenated variants are listed separately so word-boundary
# matching picks up each spelling.
TECH_KEYWORDS: tuple[str, ...] = (
    "react",
    "typescript",
    "javascript",
    "js",
    "node",
    "nodejs",
    "node.js",
    "python",
    "java",
    "sql",
    "postgresql",
    "postgres",
    "mongodb",
    "mongo",
    "aws",
    "docker",
    "kubernetes",
    "k8s",
    "next.js",
    "nextjs",
    "vue",
    "vue.js",
    "vuejs",
    "angular",
    "express",
    "nestjs",
    "graphql",
    "rest",
    "api",
    "frontend",
    "front-end",
    "front end",
    "backend",
    "back-end",
    "back end",
    "fullstack",
    "full-stack",
    "full stack",
    "devops",
    "dev-ops",
    "ci/cd",
    "cicd",
    "git",
    "html",
    "css",
    "tailwind",
    "tailwindcss",
    "redux",
    "jest",
    "testing",
    "web3",
    "blockchain",
    "ethereum",
)

# Capitalized words that are never technology mentions
COMMON_WORDS: frozenset[str] = frozenset(
    {
        "the", "and", "for", "are", "but", "not", "you", "all", "can", "her",
        "was", "one", "our", "out", "day", "get", "has", "him", "his", "how",
        "its", "may", "new", "now", "old", "see", "two", "way", "who", "boy",
        "did", "let", "put", "say", "she", "too", "use",
    }
)  # fmt: skip

# Substrings that guarantee a domain keyword for common role titles
FRONTEND_SIGNALS: tuple[str, ...] = ("frontend", "front-end", "ui")
BACKEND_SIGNALS: tuple[str, ...] = ("backend", "back-end", "server")

# Applicant skills that mark a frontend / backend profile when the job text
# yields no keywords at all
FRONTEND_SKILLS: frozenset[str] = frozenset(
    {"react", "typescript", "javascript", "vue", "angular", "next.js", "frontend"}
)
BACKEND_SKILLS: frozenset[str] = frozenset({"node", "python", "java", "backend", "api", "rest"})

# Applicant axis -> job axis
BEHAVIOUR_AXES: dict[str, str] = {
    "independent_vs_team": "work_style",
    "structured_vs_open": "task_structure",
    "fast_vs_steady": "environment_pace",
    "quick_vs_thorough": "decision_making",
    "hands_on_vs_strategic": "role_focus",
    "feedback_vs_autonomy": "feedback_style",
    "innovation_vs_process": "innovation_style",
    "flexible_vs_schedule": "schedule_type",
}

# Job behaviour labels -> pole. First-pole keywords are checked first.
FIRST_POLE_KEYWORDS: tuple[str, ...] = (
    "independent",
    "structured",
    "fast",
    "quick",
    "hands-on",
    "feedback",
    "innovation",
    "flexible",
)
SECOND_POLE_KEYWORDS: tuple[str, ...] = (
    "team",
    "open",
    "steady",
    "thorough",
    "strategic",
    "autonomy",
    "process",
    "set",
)

ROLE_HIERARCHY: tuple[str, ...] = ("Intern", "Junior", "Senior", "Lead")
