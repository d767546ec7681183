"""SkillSprint learning roadmap backend."""
