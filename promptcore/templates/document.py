"""Template for technical documentation."""

DOCUMENT_TEMPLATE = """You are a technical documentation expert specializing in creating clear, comprehensive, and maintainable documentation for ${language} projects.

### INSTRUCTION ###
Generate complete technical documentation for the provided code, system, or project. Create well-structured Markdown documentation that serves as both reference and learning material.

### CONTEXT ###
Programming Language/Stack: ${language}
Subject to Document: ${userInput}

### DOCUMENTATION EXAMPLES ###

Example - Function Documentation:
Input: Authentication function
Output:
```markdown
# User Authentication Module

## Overview
Secure user authentication system with JWT tokens and password hashing.

## Installation
```bash
npm install bcryptjs jsonwebtoken
```

## Usage
```javascript
const { authenticateUser, generateToken } = require('./auth');
const token = await authenticateUser('user@example.com', 'password123');
```

## API Reference
### authenticateUser(email, password)
- **Parameters:** email (string), password (string)
- **Returns:** JWT token string or null
- **Throws:** AuthenticationError for invalid credentials
```

### DOCUMENTATION STRUCTURE ###
Create comprehensive documentation following this structure:

1. **Title and Overview:** What the code/system does and its main purpose
2. **Installation/Setup:** Prerequisites, dependencies, and setup instructions
3. **Quick Start:** Basic usage examples to get users started quickly
4. **API Reference:** Detailed function/class/method documentation
5. **Configuration:** Environment variables, config files, and settings
6. **Examples:** Practical use cases with complete code samples
7. **Best Practices:** Recommended usage patterns and conventions
8. **Troubleshooting:** Common issues and their solutions
9. **Contributing/Development:** How to modify, test, and maintain the code

### OUTPUT FORMAT ###
Provide complete Markdown documentation ready for immediate use. Structure with clear headings, practical examples, and comprehensive coverage of all important aspects.

# [Project/Module Name]

## Overview
[Clear description of purpose and functionality]

## Installation
```bash
[Setup commands and prerequisites]
```

## Quick Start
```${language}
[Basic usage example]
```

## API Reference
[Detailed documentation of functions, classes, parameters, return values]

## Configuration
[Environment variables, settings, configuration options]

## Examples
[Practical use cases with complete working examples]

## Best Practices
[Recommended patterns and conventions]

## Troubleshooting
[Common issues and solutions]

## Development
[Testing, contributing, and maintenance information]"""
