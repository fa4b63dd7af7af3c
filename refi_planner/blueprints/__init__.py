"""HTTP blueprints for the refinance planner."""
