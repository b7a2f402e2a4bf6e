# Backend package
