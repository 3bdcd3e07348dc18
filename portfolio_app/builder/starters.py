"""Starter documents for each portfolio template."""
import copy

from .components import TEMPLATES, parse_components

TEMPLATE_NAMES = {
    "minimal": "Minimal",
    "modern": "Modern",
    "creative": "Creative",
}

_DEFAULTS = {
    "minimal": [
        {"id": "1", "type": "hero", "content": {
            "name": "Alex Morgan",
            "title": "Full Stack Developer",
            "bio": "Building elegant solutions to complex problems. Specialized in React, Node.js, and cloud technologies.",
        }},
        {"id": "2", "type": "about", "content": {
            "heading": "About Me",
            "text": "I'm a passionate developer with 5+ years of experience in web development. "
                    "I love creating user-friendly applications that solve real-world problems.",
        }},
        {"id": "3", "type": "header", "content": {"text": "Projects"}},
        {"id": "4", "type": "project", "content": {
            "title": "E-Commerce Platform",
            "description": "A full-featured e-commerce platform built with React and Node.js. Features include "
                           "real-time inventory management, payment processing, and analytics dashboard.",
            "tags": ["React", "Node.js", "MongoDB", "Stripe"],
            "image": "https://images.unsplash.com/photo-1660810731526-0720827cbd38?w=800",
            "detailsLink": "",
        }},
        {"id": "5", "type": "project", "content": {
            "title": "Task Management App",
            "description": "A collaborative task management application with real-time updates, team collaboration "
                           "features, and integrations with popular productivity tools.",
            "tags": ["Vue.js", "Express", "Socket.io", "Redis"],
            "image": "https://images.unsplash.com/photo-1484480974693-6ca0a78fb36b?w=800",
            "detailsLink": "",
        }},
        {"id": "6", "type": "header", "content": {"text": "Experience"}},
        {"id": "7", "type": "experience", "content": {
            "company": "Tech Solutions Inc.",
            "position": "Senior Full Stack Developer",
            "startDate": "06/2021",
            "endDate": "",
            "current": True,
            "description": "Lead development of microservices architecture. Mentor junior developers and conduct "
                           "code reviews. Implemented CI/CD pipelines and improved deployment processes.",
        }},
        {"id": "8", "type": "experience", "content": {
            "company": "StartUp Ventures",
            "position": "Full Stack Developer",
            "startDate": "03/2019",
            "endDate": "05/2021",
            "current": False,
            "description": "Developed and maintained multiple client-facing web applications. Collaborated with "
                           "designers and product managers to deliver high-quality features on tight deadlines.",
        }},
    ],
    "modern": [
        {"id": "1", "type": "hero", "content": {
            "name": "Jordan Lee",
            "title": "Creative Developer & Designer",
            "bio": "Crafting beautiful digital experiences at the intersection of design and technology.",
        }},
        {"id": "2", "type": "header", "content": {"text": "Featured Projects"}},
        {"id": "3", "type": "project", "content": {
            "title": "SaaS Analytics Dashboard",
            "description": "A comprehensive analytics platform for SaaS companies with real-time metrics, "
                           "customizable reports, and data visualization.",
            "tags": ["React", "Next.js", "Tailwind CSS", "PostgreSQL"],
            "image": "https://images.unsplash.com/photo-1551288049-bebda4e38f71?w=800",
            "detailsLink": "",
        }},
        {"id": "4", "type": "project", "content": {
            "title": "Brand Identity Platform",
            "description": "A design system and brand management platform for enterprise clients. Streamlines "
                           "the design-to-development workflow with automated asset generation.",
            "tags": ["TypeScript", "React", "Figma API", "AWS"],
            "image": "https://images.unsplash.com/photo-1558655146-9f40138edfeb?w=800",
            "detailsLink": "",
        }},
        {"id": "5", "type": "header", "content": {"text": "Experience"}},
        {"id": "6", "type": "experience", "content": {
            "company": "Creative Digital Studio",
            "position": "Lead Creative Developer",
            "startDate": "01/2022",
            "endDate": "",
            "current": True,
            "description": "Leading a team of developers and designers to create digital experiences for "
                           "enterprise clients.",
        }},
        {"id": "7", "type": "experience", "content": {
            "company": "Design Lab Agency",
            "position": "Front-End Developer",
            "startDate": "02/2020",
            "endDate": "12/2021",
            "current": False,
            "description": "Built responsive websites and web applications for various clients.",
        }},
        {"id": "8", "type": "about", "content": {
            "heading": "About Me",
            "text": "I'm a creative developer who loves bridging the gap between design and development.",
        }},
    ],
    "creative": [
        {"id": "1", "type": "hero", "content": {
            "name": "Sam Rivers",
            "title": "Digital Artist & Developer",
            "bio": "Creating unique digital experiences that blur the line between art and code.",
        }},
        {"id": "2", "type": "header", "content": {"text": "Portfolio"}},
        {"id": "3", "type": "project", "content": {
            "title": "Interactive Art Installation",
            "description": "A web-based interactive art piece that responds to user input in real-time.",
            "tags": ["Three.js", "WebGL", "Canvas API", "GLSL"],
            "image": "https://images.unsplash.com/photo-1550745165-9bc0b252726f?w=800",
            "detailsLink": "",
        }},
        {"id": "4", "type": "project", "content": {
            "title": "Generative Art Platform",
            "description": "An algorithmic art platform that creates unique digital artwork using procedural "
                           "generation.",
            "tags": ["p5.js", "TensorFlow.js", "Web3", "Ethereum"],
            "image": "https://images.unsplash.com/photo-1618005198919-d3d4b5a92ead?w=800",
            "detailsLink": "",
        }},
        {"id": "5", "type": "header", "content": {"text": "Experience"}},
        {"id": "6", "type": "experience", "content": {
            "company": "Immersive Art Collective",
            "position": "Creative Technologist",
            "startDate": "09/2021",
            "endDate": "",
            "current": True,
            "description": "Creating digital art installations and interactive experiences.",
        }},
        {"id": "7", "type": "experience", "content": {
            "company": "Digital Studio X",
            "position": "Interactive Developer",
            "startDate": "06/2019",
            "endDate": "08/2021",
            "current": False,
            "description": "Developed interactive websites and digital experiences for brands and artists.",
        }},
    ],
}

if set(_DEFAULTS) != set(TEMPLATES):
    raise RuntimeError("every template needs a starter document")


def default_components(template: str) -> list:
    """Typed starter components for ``template``; unknown templates start empty."""
    raw = _DEFAULTS.get(template)
    if raw is None:
        return []
    return parse_components(copy.deepcopy(raw))


def template_display_name(template: str) -> str:
    return TEMPLATE_NAMES.get(template, template)
