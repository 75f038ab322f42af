"""claude-scrum-skill — installs the bundled Scrum skills into .claude/skills."""
