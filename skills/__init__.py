"""
skills — shared skill catalog.

Provides:
  • ``SkillService`` — list / get / create / update / delete
  • Skill API routes
"""
