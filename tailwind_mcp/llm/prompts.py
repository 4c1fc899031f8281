"""Every prompt template sent to the completion provider. No magic strings anywhere else.

All prompts use .format() with named placeholders. Optional requirement lines
are rendered by the calling tool and passed in already formatted.
"""

GENERATE_COMPONENT = """Generate a {component_type} component using Tailwind CSS with the following specifications:

Description: {description}
Framework: {framework}
Variant: {variant}
Size: {size}
Theme: {theme}
Responsive: {responsive}
Accessibility: {accessibility}

Requirements:
1. Use only Tailwind CSS classes
2. Make it modern and visually appealing
3. Include proper semantic HTML
{extra_requirements}
Return only the {framework} code without explanations.
{framework_hint}"""

FRAMEWORK_HINTS = {
    "react": "Return as a React functional component with TypeScript.",
    "vue": "Return as a Vue 3 single file component.",
    "svelte": "Return as a Svelte component.",
    "angular": "Return as an Angular component template.",
    "html": "",
}

OPTIMIZE_CLASSES = """Analyze and optimize the following HTML with Tailwind CSS classes:

{html}

Please perform the following optimizations:
{operations}

Return a JSON response with the following structure:
{{
  "optimizedHtml": "optimized HTML code",
  "removedClasses": ["list of removed classes"],
  "conflictsResolved": ["list of conflicts that were resolved"],
  "suggestions": ["list of improvement suggestions"],
  "improvements": ["list of specific improvements made"]
}}

Focus on:
- Removing redundant spacing classes (e.g., p-4 px-4 py-4 -> p-4)
- Resolving display conflicts (e.g., flex flex-row -> flex)
- Suggesting utility combinations (e.g., multiple border classes -> single class)
"""

CREATE_THEME = """Create a comprehensive Tailwind CSS theme based on the following specifications:

Brand Color: {brand_color}
Design Style: {style}
Color Shades: {shade_count} (50, 100, 200, ..., 900)
Include Typography: {typography}
Include Spacing: {spacing}

Requirements:
1. Generate a complete color palette with {shade_count} shades of the brand color
2. Create complementary secondary and accent colors that work well with the brand color
3. Include neutral colors (grays) that complement the theme
{extra_requirements}
Include border radius and box shadow tokens for the {style} style, and keep
contrast ratios accessible.

Return a JSON response with:
{{
  "themeConfig": {{
    "colors": {{
      "primary": {{"50": "#...", "100": "#..."}},
      "secondary": {{"50": "#...", "100": "#..."}},
      "accent": {{"50": "#...", "100": "#..."}},
      "neutral": {{"50": "#...", "100": "#..."}}
    }},
    "typography": {{"fontFamily": {{"sans": ["..."]}}, "fontSize": {{"base": ["1rem", {{"lineHeight": "1.5rem"}}]}}}},
    "spacing": {{"md": "1rem"}},
    "borderRadius": {{}},
    "boxShadow": {{}}
  }},
  "designSystemNotes": "Usage guidelines and design principles"
}}
"""

ANALYZE_DESIGN = """Analyze this HTML/CSS code for design quality, best practices, and improvements:

HTML:
{html}
{css_block}{context_block}
Cover these areas:
{areas}

Return a JSON response with:
{{
  "overallScore": 0-100,
  "sections": [
    {{
      "title": "Accessibility Analysis",
      "checks": [{{"label": "ARIA Labels", "status": "good|needs_improvement|missing", "detail": "..."}}],
      "recommendations": ["..."]
    }}
  ],
  "generalRecommendations": ["..."]
}}
"""

ANALYSIS_AREAS = {
    "structure": "- Structure: semantic HTML, heading hierarchy, interactive elements",
    "accessibility": "- Accessibility: ARIA labels, semantic roles, alt text, keyboard navigation",
    "responsive": "- Responsive Design: mobile-first approach, breakpoints, flexible layouts",
    "performance": "- Performance: class volume, duplication, render cost",
}

SUGGEST_IMPROVEMENTS = """Analyze this HTML code and provide design improvement suggestions:

HTML Code:
{html}
{context_block}{audience_block}
Focus Areas: {focus_areas}

For each suggestion give the current issue, a specific recommendation using
Tailwind classes, a priority (High/Medium/Low), and an optional code example.

Return a JSON response with:
{{
  "groups": [
    {{
      "area": "accessibility",
      "suggestions": [
        {{"title": "...", "issue": "...", "recommendation": "...", "priority": "High", "example": "...", "exampleLanguage": "html"}}
      ]
    }}
  ]
}}
"""

CONVERT_TO_TAILWIND = """Convert the following {format_upper} code to Tailwind CSS classes:

{code}

Requirements:
1. Convert all possible CSS properties to equivalent Tailwind classes
2. {custom_requirement}
3. {optimize_requirement}
4. Maintain the visual appearance exactly

Return a JSON response with:
{{
  "convertedCode": "HTML/CSS with Tailwind classes",
  "conversionNotes": ["List of conversion notes and decisions made"],
  "unconvertedStyles": ["List of styles that couldn't be converted"],
  "suggestions": ["List of optimization suggestions"]
}}
"""

CREATE_LAYOUT = """Generate a complete {complexity} {layout_type} layout using Tailwind CSS with the following specifications:

Layout Type: {layout_type}
Sections: {sections}
Complexity: {complexity}
Framework: {framework}

Requirements:
1. Create a fully responsive layout using Tailwind CSS
2. Include proper semantic HTML structure
3. Use modern CSS Grid and Flexbox techniques
4. Implement mobile-first responsive design
5. Include placeholder content that's realistic for a {layout_type}
6. Include interactive elements with hover states
7. Ensure accessibility with proper ARIA labels
{framework_hint}

For a {layout_type} layout, focus on:
{focus_points}

Return complete code only.
"""

LAYOUT_FRAMEWORK_HINTS = {
    "react": "Generate as React functional components with TypeScript.",
    "vue": "Generate as Vue 3 composition API components.",
    "svelte": "Generate as Svelte components.",
    "html": "",
}

LAYOUT_FOCUS_POINTS = {
    "dashboard": "- Data visualization areas\n- Sidebar navigation\n- Content hierarchy\n- Action buttons and controls",
    "landing": "- Hero section with compelling CTA\n- Feature highlights\n- Social proof elements\n- Clear value proposition",
    "blog": "- Content readability\n- Article typography\n- Categories and navigation\n- Related posts",
    "ecommerce": "- Product showcase\n- Search and filtering\n- Trust indicators\n- Purchase flow",
    "portfolio": "- Project showcases\n- About section\n- Contact information\n- Visual appeal",
    "documentation": "- Clear information hierarchy\n- Table of contents\n- Code examples\n- Easy navigation",
}
