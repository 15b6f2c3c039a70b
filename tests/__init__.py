"""
ChemQuiz Test Suite

Test modules:
- test_compounds.py: Compound display strings, hints and parsing
- test_catalog.py: Category lookups and directory aggregation
- test_catalog_manifest.py: Manifest flattening and generation
- test_quiz.py: Quiz generation engine
- test_structure_renderer.py: RDKit structure depiction
- test_api.py: Web API endpoints

Run all tests:
    pytest tests/ -v

Run specific test file:
    pytest tests/test_quiz.py -v
"""
