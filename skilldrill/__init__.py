"""SkillDrill backend: skills, drills, practice sessions and progress stats."""
