"""
Component schemas for the portfolio builder.

A portfolio is an ordered list of components. Each component is
``{id, type, content}`` where the shape of ``content`` depends on ``type``.
Field names are stored in camelCase (``startDate``, ``detailsLink``) since that
is what the saved documents use; the Python attributes are snake_case.
"""
import copy
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ComponentType(str, Enum):
    HERO = "hero"
    HEADER = "header"
    TEXT = "text"
    ABOUT = "about"
    PROJECT = "project"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    CERTIFICATION = "certification"
    IMAGE = "image"
    DIVIDER = "divider"


TEMPLATES = ("minimal", "modern", "creative")


class ContentModel(BaseModel):
    # unknown keys (project role/timeline/outcomes ...) are carried along untouched
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class HeroContent(ContentModel):
    name: str = ""
    title: str = ""
    bio: str = ""


class HeaderContent(ContentModel):
    text: str = ""


class TextContent(ContentModel):
    text: str = ""


class AboutContent(ContentModel):
    heading: str = ""
    text: str = ""


class ProjectContent(ContentModel):
    title: str = ""
    description: str = ""
    tags: List[str] = Field(default_factory=list)
    image: str = ""
    additional_images: List[str] = Field(default_factory=list)
    details_link: str = ""


class ExperienceContent(ContentModel):
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""


class EducationContent(ContentModel):
    school: str = ""
    degree: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""


class CertificationContent(ContentModel):
    name: str = ""
    issuer: str = ""
    date: str = ""
    expiration_date: str = ""
    credential_link: str = ""
    image: str = ""


class ImageContent(ContentModel):
    url: str = ""
    caption: str = ""
    width: Literal["small", "medium", "large", "full"] = "full"
    alignment: Literal["left", "center", "right"] = "center"


class DividerContent(ContentModel):
    style: Literal["solid", "dashed", "dotted"] = "solid"
    thickness: Literal["thin", "medium", "thick"] = "medium"
    color: str = "#d1d5db"


CONTENT_MODELS = {
    ComponentType.HERO: HeroContent,
    ComponentType.HEADER: HeaderContent,
    ComponentType.TEXT: TextContent,
    ComponentType.ABOUT: AboutContent,
    ComponentType.PROJECT: ProjectContent,
    ComponentType.EXPERIENCE: ExperienceContent,
    ComponentType.EDUCATION: EducationContent,
    ComponentType.CERTIFICATION: CertificationContent,
    ComponentType.IMAGE: ImageContent,
    ComponentType.DIVIDER: DividerContent,
}


class _ComponentBase(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(..., min_length=1)

    @property
    def component_type(self) -> ComponentType:
        return ComponentType(self.type)

    def to_dict(self) -> dict:
        return {"id": self.id, "type": self.type, "content": self.content.to_dict()}


class HeroComponent(_ComponentBase):
    type: Literal["hero"] = "hero"
    content: HeroContent = Field(default_factory=HeroContent)


class HeaderComponent(_ComponentBase):
    type: Literal["header"] = "header"
    content: HeaderContent = Field(default_factory=HeaderContent)


class TextComponent(_ComponentBase):
    type: Literal["text"] = "text"
    content: TextContent = Field(default_factory=TextContent)


class AboutComponent(_ComponentBase):
    type: Literal["about"] = "about"
    content: AboutContent = Field(default_factory=AboutContent)


class ProjectComponent(_ComponentBase):
    type: Literal["project"] = "project"
    content: ProjectContent = Field(default_factory=ProjectContent)


class ExperienceComponent(_ComponentBase):
    type: Literal["experience"] = "experience"
    content: ExperienceContent = Field(default_factory=ExperienceContent)


class EducationComponent(_ComponentBase):
    type: Literal["education"] = "education"
    content: EducationContent = Field(default_factory=EducationContent)


class CertificationComponent(_ComponentBase):
    type: Literal["certification"] = "certification"
    content: CertificationContent = Field(default_factory=CertificationContent)


class ImageComponent(_ComponentBase):
    type: Literal["image"] = "image"
    content: ImageContent = Field(default_factory=ImageContent)


class DividerComponent(_ComponentBase):
    type: Literal["divider"] = "divider"
    content: DividerContent = Field(default_factory=DividerContent)


Component = Annotated[
    Union[
        HeroComponent,
        HeaderComponent,
        TextComponent,
        AboutComponent,
        ProjectComponent,
        ExperienceComponent,
        EducationComponent,
        CertificationComponent,
        ImageComponent,
        DividerComponent,
    ],
    Field(discriminator="type"),
]

COMPONENT_CLASSES = {
    ComponentType.HERO: HeroComponent,
    ComponentType.HEADER: HeaderComponent,
    ComponentType.TEXT: TextComponent,
    ComponentType.ABOUT: AboutComponent,
    ComponentType.PROJECT: ProjectComponent,
    ComponentType.EXPERIENCE: ExperienceComponent,
    ComponentType.EDUCATION: EducationComponent,
    ComponentType.CERTIFICATION: CertificationComponent,
    ComponentType.IMAGE: ImageComponent,
    ComponentType.DIVIDER: DividerComponent,
}


class PortfolioDocument(BaseModel):
    """The whole document the builder edits and the server stores."""

    id: Optional[str] = None
    name: str = ""
    template: str = "minimal"
    components: List[Component] = Field(default_factory=list)

    @field_validator("components")
    @classmethod
    def ids_are_unique(cls, components):
        seen = set()
        for component in components:
            if component.id in seen:
                raise ValueError(f"duplicate component id: {component.id}")
            seen.add(component.id)
        return components

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "template": self.template,
            "components": [c.to_dict() for c in self.components],
        }


def build_component(component_id: str, component_type, content=None):
    """Build a typed component, validating ``content`` against the type's schema."""
    component_type = ComponentType(component_type)
    content_model = CONTENT_MODELS[component_type]
    if isinstance(content, content_model):
        content = content.model_copy(deep=True)
    else:
        content = content_model.model_validate(content or {})
    return COMPONENT_CLASSES[component_type](id=component_id, content=content)


def parse_components(raw_components) -> list:
    """Validate a list of raw ``{id, type, content}`` dicts (raises ValueError)."""
    return PortfolioDocument.model_validate({"components": raw_components or []}).components


# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------

class PaletteEntry(BaseModel):
    type: ComponentType
    icon: str
    label: str
    description: str
    default_content: dict

    def new_content(self) -> dict:
        return copy.deepcopy(self.default_content)


PALETTE = [
    PaletteEntry(
        type=ComponentType.HERO, icon="user-circle", label="Title",
        description="Name, Title, and Bio",
        default_content={"name": "Your Name", "title": "Your Title",
                         "bio": "Write a brief bio about yourself..."},
    ),
    PaletteEntry(
        type=ComponentType.HEADER, icon="heading", label="Header",
        description="Section heading",
        default_content={"text": "New Section"},
    ),
    PaletteEntry(
        type=ComponentType.TEXT, icon="type", label="Text Block",
        description="Paragraph or rich text",
        default_content={"text": "Enter your text here..."},
    ),
    PaletteEntry(
        type=ComponentType.IMAGE, icon="image", label="Image",
        description="Single image with caption",
        default_content={"url": "", "caption": "", "width": "full", "alignment": "center"},
    ),
    PaletteEntry(
        type=ComponentType.ABOUT, icon="user", label="About Section",
        description="Introduction and bio",
        default_content={"heading": "About Me", "text": "Write about yourself..."},
    ),
    PaletteEntry(
        type=ComponentType.PROJECT, icon="folder-git-2", label="Project",
        description="Single project showcase",
        default_content={"title": "Project Title", "description": "Project description",
                         "tags": [], "image": "", "additionalImages": []},
    ),
    PaletteEntry(
        type=ComponentType.CERTIFICATION, icon="award", label="Certification",
        description="Certificate or credential",
        default_content={"name": "Certification Name", "issuer": "Issuing Organization",
                         "date": "", "credentialLink": "", "image": ""},
    ),
    PaletteEntry(
        type=ComponentType.EXPERIENCE, icon="briefcase", label="Work Experience",
        description="Job or internship",
        default_content={"company": "Company Name", "position": "Position",
                         "startDate": "", "endDate": "",
                         "description": "Describe your role and achievements...",
                         "current": False},
    ),
    PaletteEntry(
        type=ComponentType.EDUCATION, icon="graduation-cap", label="Education",
        description="School or degree",
        default_content={"school": "School Name",
                         "degree": "Bachelor of Science in Computer Science",
                         "startDate": "", "endDate": "",
                         "description": "Describe your studies and achievements...",
                         "current": False},
    ),
    PaletteEntry(
        type=ComponentType.DIVIDER, icon="minus", label="Divider Line",
        description="Section separator",
        default_content={"style": "solid", "thickness": "medium", "color": "#d1d5db"},
    ),
]

PALETTE_BY_TYPE = {entry.type: entry for entry in PALETTE}

if set(PALETTE_BY_TYPE) != set(ComponentType):
    raise RuntimeError("every component type needs a palette entry")
